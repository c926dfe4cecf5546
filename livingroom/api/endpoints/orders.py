# livingroom/api/endpoints/orders.py
import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from livingroom.core.database import get_db
from livingroom.core.errors import NotFound, ValidationFailed
from livingroom.core.utils import is_valid_phone
from livingroom.models.schemas import (
    CreateOrderRequest,
    OrderOut,
    PaymentConfirmRequest,
    StatusUpdateRequest,
)
from livingroom.models.sql_models import Order
from livingroom.services.cart import Cart
from livingroom.services.notifications import notify_new_order
from livingroom.services.order_status import apply_status, cancel_order
from livingroom.services.order_writer import is_cash_on_delivery, place_order, timestamp_order_number

logger = logging.getLogger(__name__)

router = APIRouter()


def order_to_dict(order: Order) -> dict:
    return OrderOut.model_validate(order).model_dump()


def get_order_or_404(db: Session, order_id: int) -> Order:
    order = db.query(Order).filter(Order.id == order_id).first()
    if not order:
        raise NotFound("Order not found")
    return order


# --- CHECKOUT ---
@router.post("/orders")
def create_order(payload: CreateOrderRequest, db: Session = Depends(get_db)):
    details = payload.customer_details
    if not details.name or not details.phone or not details.address:
        raise ValidationFailed("Missing required fields")
    if not payload.cart_items:
        raise ValidationFailed("Cart is empty")

    cart = Cart.from_items(payload.cart_items)
    if payload.amounts:
        subtotal, gst, total = payload.amounts.subtotal, payload.amounts.gst, payload.amounts.total
    else:
        totals = cart.totals()
        subtotal, gst, total = totals.subtotal, totals.gst, totals.total

    payment_method = payload.payment_method or "Cash on Delivery"
    is_cod = is_cash_on_delivery(payment_method)

    order = place_order(
        db,
        order_number=timestamp_order_number(),
        customer_name=details.name,
        customer_phone=details.phone,
        customer_address=details.address,
        special_notes=details.notes,
        lines=cart.lines,
        subtotal=subtotal,
        gst_amount=gst,
        total_amount=total,
        payment_method=payment_method,
        payment_status="pending" if is_cod else "paid",
        transaction_id=payload.transaction_id,
        user_id=payload.user_id,
    )

    whatsapp_url, email_sent = notify_new_order(order, cart.lines, is_cod)

    return {
        "success": True,
        "orderNumber": order.order_number,
        "orderId": order.id,
        "order": order_to_dict(order),
        "whatsappUrl": whatsapp_url,
        "emailSent": email_sent,
    }


@router.get("/orders")
def get_order(order_number: str = Query(None, alias="orderNumber"), db: Session = Depends(get_db)):
    if not order_number:
        raise ValidationFailed("Order number required")
    order = db.query(Order).filter(Order.order_number == order_number).first()
    if not order:
        raise NotFound("Order not found")
    return {"success": True, "order": order_to_dict(order)}


@router.put("/orders")
def update_order_status(payload: StatusUpdateRequest, db: Session = Depends(get_db)):
    # Any status string is written here; only the admin PUT checks the list.
    if not payload.order_id or not payload.status:
        raise ValidationFailed("Missing orderId or status")
    order = get_order_or_404(db, payload.order_id)
    apply_status(order, payload.status)
    db.commit()
    db.refresh(order)
    logger.info("Order %s -> %s", order.order_number, order.order_status)
    return {"success": True, "order": order_to_dict(order), "message": f"Order status updated to {payload.status}"}


@router.delete("/orders")
def delete_order(order_id: int = Query(None, alias="orderId"), db: Session = Depends(get_db)):
    if not order_id:
        raise ValidationFailed("Missing orderId")
    order = get_order_or_404(db, order_id)
    cancel_order(order)
    db.commit()
    logger.info("Order %s cancelled", order.order_number)
    return {"success": True, "message": "Order cancelled successfully"}


# --- CUSTOMER LOOKUPS ---
@router.get("/order-history")
def order_history(phone: str = Query(None), db: Session = Depends(get_db)):
    if not is_valid_phone(phone):
        raise ValidationFailed("Please enter a valid 10-digit phone number")
    orders = db.query(Order).filter(Order.customer_phone == phone).order_by(Order.created_at.desc(), Order.id.desc()).all()
    return {"success": True, "orders": [order_to_dict(o) for o in orders]}


@router.get("/track-order")
def track_order(
    order_number: str = Query(None, alias="orderNumber"),
    phone: str = Query(None),
    db: Session = Depends(get_db),
):
    if not order_number or not phone:
        raise ValidationFailed("Order number and phone required")
    order = db.query(Order).filter(
        Order.order_number == order_number.upper(),
        Order.customer_phone == phone,
    ).first()
    if not order:
        raise NotFound("Order not found. Please check your details.")
    return {"success": True, "order": order_to_dict(order)}


# --- PAYMENT ---
@router.post("/payment/confirm")
def confirm_payment(payload: PaymentConfirmRequest, db: Session = Depends(get_db)):
    if not payload.order_id or not payload.payment_method:
        raise ValidationFailed("Missing required fields")
    order = get_order_or_404(db, payload.order_id)

    # Order status is left alone; payment and fulfilment move independently.
    order.payment_method = payload.payment_method
    if payload.payment_status is not None:
        order.payment_status = payload.payment_status
    if payload.transaction_id:
        order.transaction_id = payload.transaction_id
        order.special_notes = f"UPI Transaction ID: {payload.transaction_id}"

    db.commit()
    db.refresh(order)
    logger.info("Payment for %s: %s/%s", order.order_number, order.payment_method, order.payment_status)
    return {"success": True, "order": order_to_dict(order), "message": "Payment confirmed successfully"}
