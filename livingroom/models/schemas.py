# livingroom/models/schemas.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional, Union

# Request bodies use the camelCase names the website sends; populate_by_name
# keeps the snake_case attribute names usable from Python.
CAMEL = {"populate_by_name": True, "extra": "ignore"}


# --- Cart / checkout ---
class CartItemIn(BaseModel):
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    item_name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = 1
    is_veg: Optional[bool] = None

    model_config = CAMEL


class CustomerDetails(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class Amounts(BaseModel):
    subtotal: float = 0
    gst: float = 0
    delivery_fee: float = Field(0, alias="deliveryFee")
    total: float = 0

    model_config = CAMEL


class CartQuoteRequest(BaseModel):
    items: List[CartItemIn] = []


class CreateOrderRequest(BaseModel):
    customer_details: CustomerDetails = Field(default_factory=CustomerDetails, alias="customerDetails")
    cart_items: List[CartItemIn] = Field(default_factory=list, alias="cartItems")
    amounts: Optional[Amounts] = None
    payment_method: Optional[str] = Field(None, alias="paymentMethod")
    transaction_id: Optional[str] = Field(None, alias="transactionId")
    user_id: Optional[int] = Field(None, alias="userId")

    model_config = CAMEL


class AdminCreateOrderRequest(BaseModel):
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    special_notes: Optional[str] = None
    items: Optional[List[CartItemIn]] = None
    subtotal: Optional[float] = 0
    gst_amount: Optional[float] = 0
    total_amount: Optional[float] = 0
    payment_method: Optional[str] = None


class StatusUpdateRequest(BaseModel):
    order_id: Optional[int] = Field(None, alias="orderId")
    status: Optional[str] = None

    model_config = CAMEL


class AdminOrderPatch(BaseModel):
    status: Optional[str] = None
    admin_notes: Optional[str] = None
    cancel_reason: Optional[str] = None


class PaymentConfirmRequest(BaseModel):
    order_id: Optional[int] = Field(None, alias="orderId")
    payment_method: Optional[str] = Field(None, alias="paymentMethod")
    payment_status: Optional[str] = Field(None, alias="paymentStatus")
    transaction_id: Optional[str] = Field(None, alias="transactionId")

    model_config = CAMEL


# --- Menu ---
class MenuItemWrite(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[int] = None
    is_veg: Optional[bool] = None
    is_available: Optional[bool] = None
    image_url: Optional[str] = None


class CategoryWrite(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    icon: Optional[str] = None
    display_order: Optional[int] = None


# --- Auth / profile ---
class AdminLoginRequest(BaseModel):
    password: Optional[str] = None


class CustomerLoginRequest(BaseModel):
    phone: Optional[str] = None
    name: Optional[str] = None


class UserUpdateRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = CAMEL


class AddressWrite(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")
    label: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    landmark: Optional[str] = None
    is_default: Optional[bool] = None

    model_config = CAMEL


# --- Catering ---
class CateringInquiryRequest(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    event_type: Optional[str] = Field(None, alias="eventType")
    event_date: Optional[str] = Field(None, alias="eventDate")
    guest_count: Optional[Union[int, str]] = Field(None, alias="guestCount")
    venue: Optional[str] = None
    budget: Optional[str] = None
    requirements: Optional[str] = None

    model_config = CAMEL


# --- Responses (read straight off the SQLAlchemy rows) ---
class CategoryOut(BaseModel):
    id: int
    name: str
    icon: Optional[str] = None
    display_order: Optional[int] = None

    model_config = {"from_attributes": True}


class MenuItemOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category_id: Optional[int] = None
    is_veg: bool
    is_available: bool
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class OrderItemOut(BaseModel):
    id: int
    order_id: int
    item_name: str
    price: float
    quantity: int
    is_veg: Optional[bool] = None

    model_config = {"from_attributes": True}


class OrderOut(BaseModel):
    id: int
    order_number: str
    user_id: Optional[int] = None
    customer_name: str
    customer_phone: str
    customer_address: str
    special_notes: Optional[str] = None
    subtotal: float
    gst_amount: float
    total_amount: float
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    transaction_id: Optional[str] = None
    order_status: Optional[str] = None
    admin_notes: Optional[str] = None
    cancel_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    prepared_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    order_items: List[OrderItemOut] = []

    model_config = {"from_attributes": True}


class UserOut(BaseModel):
    id: int
    phone: str
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AddressOut(BaseModel):
    id: int
    user_id: int
    label: Optional[str] = None
    address_line1: str
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    landmark: Optional[str] = None
    is_default: bool = False

    model_config = {"from_attributes": True}


class CateringInquiryOut(BaseModel):
    id: int
    inquiry_number: str
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    event_type: Optional[str] = None
    event_date: str
    guest_count: Optional[int] = None
    venue: Optional[str] = None
    budget: Optional[str] = None
    requirements: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
