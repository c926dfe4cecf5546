# livingroom/models/sql_models.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, DateTime, Text, Date
from sqlalchemy.orm import relationship
from livingroom.core.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class Category(Base):
    __tablename__ = "categories"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    icon = Column(String)
    display_order = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class MenuItem(Base):
    __tablename__ = "menu_items"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, default="")
    price = Column(Float, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), index=True)
    is_veg = Column(Boolean, default=True)
    is_available = Column(Boolean, default=True)  # False = sold out
    image_url = Column(String)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    phone = Column(String, unique=True, index=True, nullable=False)
    name = Column(String)
    email = Column(String)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow)

    addresses = relationship("Address", back_populates="user")


class Address(Base):
    __tablename__ = "addresses"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    label = Column(String, default="Home")
    address_line1 = Column(String, nullable=False)
    address_line2 = Column(String)
    city = Column(String)
    state = Column(String)
    pincode = Column(String)
    landmark = Column(String)
    is_default = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    user = relationship("User", back_populates="addresses")


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String, unique=True, index=True, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False, index=True)
    customer_address = Column(Text, nullable=False)
    special_notes = Column(Text)

    subtotal = Column(Float, default=0)
    gst_amount = Column(Float, default=0)
    total_amount = Column(Float, default=0)

    payment_method = Column(String, default="cod")
    payment_status = Column(String, default="pending")
    transaction_id = Column(String)
    order_status = Column(String, default="pending", index=True)

    admin_notes = Column(Text)
    cancel_reason = Column(Text)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    confirmed_at = Column(DateTime(timezone=True))
    prepared_at = Column(DateTime(timezone=True))
    delivered_at = Column(DateTime(timezone=True))
    cancelled_at = Column(DateTime(timezone=True))

    # No cascade: the order/items pair is written and undone by hand
    order_items = relationship("OrderItem", back_populates="order", lazy="selectin", passive_deletes=True)


class OrderItem(Base):
    __tablename__ = "order_items"
    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), index=True, nullable=False)
    item_name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    is_veg = Column(Boolean, default=True)

    order = relationship("Order", back_populates="order_items")


class OrderNumberSequence(Base):
    """One row per calendar day; ``last_value`` is the last number handed out."""
    __tablename__ = "order_number_sequences"
    day = Column(Date, primary_key=True)
    last_value = Column(Integer, nullable=False, default=0)


class CateringInquiry(Base):
    __tablename__ = "catering_inquiries"
    id = Column(Integer, primary_key=True, index=True)
    inquiry_number = Column(String, unique=True, index=True, nullable=False)
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_email = Column(String)
    event_type = Column(String)
    event_date = Column(String, nullable=False)
    guest_count = Column(Integer)
    venue = Column(String)
    budget = Column(String)
    requirements = Column(Text)
    status = Column(String, default="pending")
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
