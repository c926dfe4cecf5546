"""
Shared fixtures: an in-memory SQLite database per test, the API client wired
to it, and a deterministic millisecond clock for order numbers.
"""
import itertools
import os

# Must be set before the app modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_PASSWORD"] = "letmein"
os.environ["RESEND_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from livingroom.core.database import Base, get_db
from livingroom.models.sql_models import Category, MenuItem
from livingroom.services import order_writer


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def ticking_clock(monkeypatch):
    # Two orders in the same millisecond would share an order number
    ticks = itertools.count(1760000000000)
    monkeypatch.setattr(order_writer, "get_current_time_ms", lambda: next(ticks))


@pytest.fixture
def checkout_payload():
    def make(**overrides):
        payload = {
            "customerDetails": {"name": "Asha", "phone": "9876543210", "address": "12 MG Road"},
            "cartItems": [{"id": 1, "name": "Paneer Tikka", "price": 220, "quantity": 2, "is_veg": True}],
            "amounts": {"subtotal": 440, "gst": 22, "deliveryFee": 0, "total": 462},
            "paymentMethod": "Cash on Delivery",
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture
def place_order(client, checkout_payload):
    def place(**overrides):
        resp = client.post("/api/orders", json=checkout_payload(**overrides))
        assert resp.status_code == 200, resp.text
        return resp.json()
    return place


@pytest.fixture
def menu(db_session):
    starters = Category(name="Starters", icon="🥗", display_order=1)
    mains = Category(name="Mains", icon="🍛", display_order=2)
    db_session.add_all([mains, starters])
    db_session.commit()
    items = [
        MenuItem(name="Paneer Tikka", price=220, category_id=starters.id, is_veg=True),
        MenuItem(name="Chicken Biryani", price=320, category_id=mains.id, is_veg=False),
        MenuItem(name="Dal Makhani", price=180, category_id=mains.id, is_veg=True, is_available=False),
    ]
    db_session.add_all(items)
    db_session.commit()
    return {"categories": [starters, mains], "items": items}
