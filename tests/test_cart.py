from livingroom.services.cart import Cart, CartLine, round_rupees


def test_paneer_tikka_totals():
    cart = Cart([CartLine(id=1, name="Paneer Tikka", price=220, quantity=2)])
    totals = cart.totals()
    assert totals.subtotal == 440
    assert totals.gst == 22
    assert totals.delivery_fee == 0
    assert totals.total == 462


def test_gst_rounds_half_up():
    assert round_rupees(0.5) == 1
    assert round_rupees(2.5) == 3
    assert round_rupees(2.49) == 2
    cart = Cart([CartLine(id=1, name="Chai", price=30, quantity=1)])
    # 5% of 30 is 1.5
    assert cart.totals().gst == 2


def test_add_merges_same_item():
    cart = Cart()
    cart.add(CartLine(id=1, name="Chai", price=30))
    cart.add(CartLine(id=1, name="Chai", price=30, quantity=2))
    cart.add(CartLine(id=2, name="Samosa", price=20))
    assert len(cart.lines) == 2
    assert cart.total_items == 4


def test_update_quantity_below_one_removes_line():
    cart = Cart([CartLine(id=1, name="Chai", price=30, quantity=3)])
    cart.update_quantity(1, 5)
    assert cart.lines[0].quantity == 5
    cart.update_quantity(1, 0)
    assert cart.lines == []


def test_remove_and_clear():
    cart = Cart([CartLine(id=1, name="Chai", price=30), CartLine(id=2, name="Samosa", price=20)])
    cart.remove(1)
    assert [line.name for line in cart.lines] == ["Samosa"]
    cart.clear()
    assert cart.totals().total == 0


def test_quote_endpoint(client):
    resp = client.post("/api/cart/quote", json={"items": [
        {"id": 1, "name": "Paneer Tikka", "price": 220, "quantity": 2},
        {"id": 2, "name": "Masala Chai", "price": 40, "quantity": 1},
    ]})
    assert resp.status_code == 200
    body = resp.json()
    assert body == {
        "success": True,
        "subtotal": 480,
        "gst": 24,
        "deliveryFee": 0,
        "total": 504,
        "totalItems": 3,
    }
