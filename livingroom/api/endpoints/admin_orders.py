# livingroom/api/endpoints/admin_orders.py
import logging
import math
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from livingroom.api.endpoints.orders import get_order_or_404, order_to_dict
from livingroom.core.database import get_db
from livingroom.core.errors import ValidationFailed
from livingroom.models.schemas import AdminCreateOrderRequest, AdminOrderPatch, StatusUpdateRequest
from livingroom.models.sql_models import MenuItem, Order
from livingroom.services.cart import Cart
from livingroom.services.order_status import apply_status, cancel_order, is_valid_status
from livingroom.services.order_writer import place_order, sequence_order_number

logger = logging.getLogger(__name__)

router = APIRouter()


def start_of_today() -> datetime:
    return datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


# --- LIST / FILTER ---
@router.get("/orders")
def list_orders(
    status: str = Query(None),
    search: str = Query(None),
    date: str = Query(None),
    page: int = Query(1),
    limit: int = Query(20),
    db: Session = Depends(get_db),
):
    query = db.query(Order)

    if status and status != "all":
        query = query.filter(Order.order_status == status)

    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Order.order_number.ilike(pattern),
            Order.customer_name.ilike(pattern),
            Order.customer_phone.ilike(pattern),
        ))

    today = start_of_today()
    if date == "today":
        query = query.filter(Order.created_at >= today)
    elif date == "yesterday":
        query = query.filter(Order.created_at >= today - timedelta(days=1), Order.created_at < today)
    elif date == "week":
        query = query.filter(Order.created_at >= datetime.now(timezone.utc) - timedelta(days=7))

    page = max(page, 1)
    limit = max(limit, 1)
    total = query.count()
    orders = (
        query.order_by(Order.created_at.desc(), Order.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "success": True,
        "orders": [order_to_dict(o) for o in orders],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit),
        },
    }


# --- CREATE (counter numbered) ---
@router.post("/orders")
def admin_create_order(payload: AdminCreateOrderRequest, db: Session = Depends(get_db)):
    if not payload.customer_name or not payload.customer_phone or not payload.customer_address or not payload.items:
        raise ValidationFailed("Missing required fields")

    cart = Cart.from_items(payload.items)
    order = place_order(
        db,
        order_number=sequence_order_number(db),
        customer_name=payload.customer_name,
        customer_phone=payload.customer_phone,
        customer_address=payload.customer_address,
        special_notes=payload.special_notes,
        lines=cart.lines,
        subtotal=float(payload.subtotal or 0),
        gst_amount=float(payload.gst_amount or 0),
        total_amount=float(payload.total_amount or 0),
        payment_method=payload.payment_method or "cod",
        payment_status="pending",
    )
    return {"success": True, "order": order_to_dict(order), "message": "Order placed successfully"}


# --- STATUS ---
@router.put("/orders")
def admin_update_status(payload: StatusUpdateRequest, db: Session = Depends(get_db)):
    if not payload.order_id or not payload.status:
        raise ValidationFailed("Missing orderId or status")
    if not is_valid_status(payload.status):
        raise ValidationFailed("Invalid status")

    order = get_order_or_404(db, payload.order_id)
    apply_status(order, payload.status, mark_paid_on_delivery=True)
    db.commit()
    db.refresh(order)
    logger.info("Admin: order %s -> %s (payment %s)", order.order_number, order.order_status, order.payment_status)
    return {"success": True, "order": order_to_dict(order), "message": f"Order status updated to {payload.status}"}


@router.delete("/orders")
def admin_cancel_order(order_id: int = Query(None, alias="orderId"), db: Session = Depends(get_db)):
    if not order_id:
        raise ValidationFailed("Missing orderId")
    order = get_order_or_404(db, order_id)
    cancel_order(order)
    db.commit()
    return {"success": True, "message": "Order cancelled successfully"}


# --- SINGLE ORDER ---
@router.get("/orders/{order_id}")
def admin_get_order(order_id: int, db: Session = Depends(get_db)):
    return {"success": True, "order": order_to_dict(get_order_or_404(db, order_id))}


@router.patch("/orders/{order_id}")
def admin_patch_order(order_id: int, payload: AdminOrderPatch, db: Session = Depends(get_db)):
    order = get_order_or_404(db, order_id)
    changes = payload.model_dump(exclude_unset=True)

    if changes.get("status"):
        apply_status(order, changes["status"])
    if "admin_notes" in changes:
        order.admin_notes = changes["admin_notes"]
    if "cancel_reason" in changes:
        order.cancel_reason = changes["cancel_reason"]

    db.commit()
    db.refresh(order)
    return {"success": True, "order": order_to_dict(order), "message": "Order updated successfully"}


@router.delete("/orders/{order_id}")
def admin_delete_order(order_id: int, db: Session = Depends(get_db)):
    order = get_order_or_404(db, order_id)
    cancel_order(order)
    db.commit()
    return {"success": True, "message": "Order cancelled successfully"}


# --- DASHBOARD ---
@router.get("/dashboard")
def dashboard(db: Session = Depends(get_db)):
    total_orders = db.query(Order).count()
    pending = db.query(Order).filter(Order.order_status == "pending").count()
    completed = db.query(Order).filter(Order.order_status == "delivered").count()
    revenue = db.query(func.coalesce(func.sum(Order.total_amount), 0)).scalar()
    today_orders = db.query(Order).filter(Order.created_at >= start_of_today()).count()
    total_items = db.query(MenuItem).count()
    available = db.query(MenuItem).filter(MenuItem.is_available.is_(True)).count()
    recent = db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).limit(5).all()

    return {
        "success": True,
        "stats": {
            "totalOrders": total_orders,
            "pendingOrders": pending,
            "completedOrders": completed,
            "totalRevenue": round(float(revenue or 0)),
            "todayOrders": today_orders,
            "totalMenuItems": total_items,
            "availableItems": available,
            "recentOrders": [order_to_dict(o) for o in recent],
        },
    }
