# livingroom/services/catalog.py
from sqlalchemy.orm import Session
from livingroom.models.sql_models import Category, MenuItem


def list_categories(db: Session):
    return db.query(Category).order_by(Category.display_order, Category.id).all()


def list_menu_items(db: Session, order_by_category: bool = False):
    query = db.query(MenuItem)
    if order_by_category:
        return query.order_by(MenuItem.category_id, MenuItem.id).all()
    return query.order_by(MenuItem.name).all()


def get_menu_item(db: Session, item_id: int):
    return db.query(MenuItem).filter(MenuItem.id == item_id).first()


def get_category(db: Session, category_id: int):
    return db.query(Category).filter(Category.id == category_id).first()
