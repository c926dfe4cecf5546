# livingroom/services/order_writer.py
"""
Writes an order and its item snapshots.

The order row and the item rows are committed separately. When the items
cannot be written the order row is deleted again by hand; if that delete
fails too the order is left behind without items and only a log line
records it.
"""
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from livingroom.core.config import settings
from livingroom.core.errors import APIError
from livingroom.core.utils import get_current_time_ms
from livingroom.models.sql_models import Order, OrderItem, OrderNumberSequence
from livingroom.services.cart import CartLine

logger = logging.getLogger(__name__)


def timestamp_order_number() -> str:
    return f"ORD{get_current_time_ms()}"


def sequence_order_number(db: Session) -> str:
    """Next ``LRC<YYYYMMDD><NNNN>`` number from the per-day counter table."""
    today = datetime.now(timezone.utc).date()
    seq = db.query(OrderNumberSequence).filter(OrderNumberSequence.day == today).first()
    if seq:
        seq.last_value += 1
    else:
        seq = OrderNumberSequence(day=today, last_value=1)
        db.add(seq)
    db.commit()
    return f"LRC{today:%Y%m%d}{seq.last_value:04d}"


def is_cash_on_delivery(payment_method: str) -> bool:
    return (payment_method or "").strip().lower() in settings.COD_METHODS


def place_order(
    db: Session,
    order_number: str,
    customer_name: str,
    customer_phone: str,
    customer_address: str,
    lines: List[CartLine],
    subtotal: float,
    gst_amount: float,
    total_amount: float,
    payment_method: str,
    payment_status: str,
    special_notes: str = None,
    transaction_id: str = None,
    user_id: int = None,
) -> Order:
    order = Order(
        order_number=order_number,
        user_id=user_id,
        customer_name=customer_name,
        customer_phone=customer_phone,
        customer_address=customer_address,
        special_notes=special_notes or None,
        subtotal=subtotal,
        gst_amount=gst_amount,
        total_amount=total_amount,
        payment_method=payment_method,
        payment_status=payment_status,
        order_status="pending",
        transaction_id=transaction_id or None,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Order %s saved (id=%s)", order.order_number, order.id)

    order_id = order.id
    try:
        db.add_all([
            OrderItem(
                order_id=order_id,
                item_name=line.name,
                price=line.price,
                quantity=line.quantity,
                is_veg=line.is_veg,
            )
            for line in lines
        ])
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Items for order %s failed: %s", order_number, e)
        remove_order(db, order_id)
        raise APIError(str(e.orig if getattr(e, "orig", None) else e), 500)

    db.refresh(order)
    logger.info("Order %s: %d item(s) saved", order.order_number, len(order.order_items))
    return order


def remove_order(db: Session, order_id: int):
    try:
        db.query(Order).filter(Order.id == order_id).delete()
        db.commit()
        logger.info("Rolled back order id=%s", order_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Rollback of order id=%s failed, order left without items: %s", order_id, e)
