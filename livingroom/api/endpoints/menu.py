# livingroom/api/endpoints/menu.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from livingroom.core.database import get_db
from livingroom.models.schemas import CartQuoteRequest, CategoryOut, MenuItemOut
from livingroom.services.cart import Cart
from livingroom.services.catalog import list_categories, list_menu_items

router = APIRouter()


@router.get("/menu")
def get_menu(db: Session = Depends(get_db)):
    categories = list_categories(db)
    items = list_menu_items(db)
    return {
        "success": True,
        "categories": [CategoryOut.model_validate(c).model_dump() for c in categories],
        "menuItems": [MenuItemOut.model_validate(m).model_dump() for m in items],
    }


@router.post("/cart/quote")
def quote_cart(payload: CartQuoteRequest):
    cart = Cart.from_items(payload.items)
    totals = cart.totals()
    return {
        "success": True,
        "subtotal": totals.subtotal,
        "gst": totals.gst,
        "deliveryFee": totals.delivery_fee,
        "total": totals.total,
        "totalItems": cart.total_items,
    }
