# livingroom/services/order_status.py
"""
Order status bookkeeping.

There is no transition table: any status may follow any other. Each status
with a timestamp column gets it stamped the first time it is reached, so a
repeated update leaves the original time in place.
"""
from livingroom.models.sql_models import Order, utcnow

ORDER_STATUSES = ("pending", "confirmed", "preparing", "out_for_delivery", "delivered", "cancelled")

STATUS_TIMESTAMPS = {
    "confirmed": "confirmed_at",
    "preparing": "prepared_at",
    "delivered": "delivered_at",
    "cancelled": "cancelled_at",
}


def is_valid_status(status: str) -> bool:
    return status in ORDER_STATUSES


def apply_status(order: Order, status: str, mark_paid_on_delivery: bool = False) -> Order:
    order.order_status = status

    column = STATUS_TIMESTAMPS.get(status)
    if column and getattr(order, column) is None:
        setattr(order, column, utcnow())

    if mark_paid_on_delivery and status == "delivered":
        order.payment_status = "paid"
    return order


def cancel_order(order: Order, reason: str = None) -> Order:
    apply_status(order, "cancelled")
    if reason is not None:
        order.cancel_reason = reason
    return order
