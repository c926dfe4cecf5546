# livingroom/services/cart.py
"""
Cart arithmetic.

The cart itself lives in the browser; the server only needs the same totals
the checkout page shows so that orders placed without an ``amounts`` block
are billed identically. GST is rounded to whole rupees, half up.
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from livingroom.core.config import settings


def round_rupees(amount: float) -> int:
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class CartLine:
    id: Optional[Union[int, str]]
    name: str
    price: float
    quantity: int = 1
    is_veg: bool = True

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass
class Totals:
    subtotal: float
    gst: int
    delivery_fee: int
    total: float


@dataclass
class Cart:
    lines: List[CartLine] = field(default_factory=list)

    @classmethod
    def from_items(cls, items) -> "Cart":
        cart = cls()
        for it in items:
            cart.lines.append(CartLine(
                id=it.id,
                name=it.name or it.item_name,
                price=float(it.price or 0),
                quantity=int(it.quantity if it.quantity is not None else 1),
                is_veg=it.is_veg if it.is_veg is not None else True,
            ))
        return cart

    def _find(self, item_id):
        for line in self.lines:
            if line.id == item_id:
                return line
        return None

    def add(self, line: CartLine):
        existing = self._find(line.id)
        if existing:
            existing.quantity += line.quantity
        else:
            self.lines.append(line)

    def remove(self, item_id):
        self.lines = [line for line in self.lines if line.id != item_id]

    def update_quantity(self, item_id, quantity: int):
        if quantity < 1:
            self.remove(item_id)
            return
        line = self._find(item_id)
        if line:
            line.quantity = quantity

    def clear(self):
        self.lines = []

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def totals(self) -> Totals:
        subtotal = sum(line.line_total for line in self.lines)
        gst = round_rupees(subtotal * settings.GST_RATE)
        delivery_fee = settings.DELIVERY_FEE
        return Totals(subtotal=subtotal, gst=gst, delivery_fee=delivery_fee, total=subtotal + gst + delivery_fee)
