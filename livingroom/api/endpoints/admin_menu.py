# livingroom/api/endpoints/admin_menu.py
import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from livingroom.core.database import get_db
from livingroom.core.errors import NotFound, ValidationFailed
from livingroom.models.schemas import CategoryOut, CategoryWrite, MenuItemOut, MenuItemWrite
from livingroom.models.sql_models import Category, MenuItem
from livingroom.services.catalog import get_category, get_menu_item, list_categories, list_menu_items

logger = logging.getLogger(__name__)

router = APIRouter()


def item_to_dict(item: MenuItem) -> dict:
    return MenuItemOut.model_validate(item).model_dump()


def category_to_dict(category: Category) -> dict:
    return CategoryOut.model_validate(category).model_dump()


# --- MENU ITEMS ---
@router.get("/menu")
def admin_list_menu(db: Session = Depends(get_db)):
    return {
        "success": True,
        "categories": [category_to_dict(c) for c in list_categories(db)],
        "menuItems": [item_to_dict(m) for m in list_menu_items(db, order_by_category=True)],
    }


@router.post("/menu")
def create_menu_item(payload: MenuItemWrite, db: Session = Depends(get_db)):
    if not payload.name or not payload.price or not payload.category_id:
        raise ValidationFailed("Missing required fields")

    item = MenuItem(
        name=payload.name,
        description=payload.description or "",
        price=float(payload.price),
        category_id=int(payload.category_id),
        is_veg=payload.is_veg is not False,
        is_available=payload.is_available is not False,
        image_url=payload.image_url,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Added menu item '%s' @ %s", item.name, item.price)
    return {"success": True, "message": "Menu item created successfully", "item": item_to_dict(item)}


@router.put("/menu")
def update_menu_item(payload: MenuItemWrite, db: Session = Depends(get_db)):
    if not payload.id:
        raise ValidationFailed("Item ID required")
    item = get_menu_item(db, payload.id)
    if not item:
        raise NotFound("Menu item not found")

    # Only the fields the client sent are written; no version check.
    changes = payload.model_dump(exclude_unset=True, exclude={"id"})
    if "price" in changes and changes["price"] is not None:
        changes["price"] = float(changes["price"])
    if "category_id" in changes and changes["category_id"] is not None:
        changes["category_id"] = int(changes["category_id"])
    for key, value in changes.items():
        setattr(item, key, value)

    db.commit()
    db.refresh(item)
    logger.info("Updated menu item id=%s: %s", item.id, sorted(changes))
    return {"success": True, "message": "Menu item updated successfully", "item": item_to_dict(item)}


@router.delete("/menu")
def delete_menu_item(item_id: int = Query(None, alias="id"), db: Session = Depends(get_db)):
    if not item_id:
        raise ValidationFailed("Item ID required")
    deleted = db.query(MenuItem).filter(MenuItem.id == item_id).delete()
    db.commit()
    logger.info("Deleted menu item id=%s (%d row)", item_id, deleted)
    return {"success": True, "message": "Menu item deleted successfully"}


# --- CATEGORIES ---
@router.get("/categories")
def admin_list_categories(db: Session = Depends(get_db)):
    return {"success": True, "categories": [category_to_dict(c) for c in list_categories(db)]}


@router.post("/categories")
def create_category(payload: CategoryWrite, db: Session = Depends(get_db)):
    if not payload.name:
        raise ValidationFailed("Missing required fields")
    category = Category(name=payload.name, icon=payload.icon, display_order=payload.display_order or 0)
    db.add(category)
    db.commit()
    db.refresh(category)
    return {"success": True, "message": "Category created successfully", "category": category_to_dict(category)}


@router.put("/categories")
def update_category(payload: CategoryWrite, db: Session = Depends(get_db)):
    if not payload.id:
        raise ValidationFailed("Category ID required")
    category = get_category(db, payload.id)
    if not category:
        raise NotFound("Category not found")
    for key, value in payload.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(category, key, value)
    db.commit()
    db.refresh(category)
    return {"success": True, "message": "Category updated successfully", "category": category_to_dict(category)}


@router.delete("/categories")
def delete_category(category_id: int = Query(None, alias="id"), db: Session = Depends(get_db)):
    if not category_id:
        raise ValidationFailed("Category ID required")
    db.query(Category).filter(Category.id == category_id).delete()
    db.commit()
    return {"success": True, "message": "Category deleted successfully"}
