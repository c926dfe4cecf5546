def test_track_with_matching_phone(client, place_order):
    created = place_order()
    resp = client.get("/api/track-order", params={"orderNumber": created["orderNumber"], "phone": "9876543210"})
    assert resp.status_code == 200
    assert resp.json()["order"]["order_number"] == created["orderNumber"]
    assert resp.json()["order"]["order_items"][0]["item_name"] == "Paneer Tikka"


def test_track_with_wrong_phone_is_404(client, place_order):
    created = place_order()
    resp = client.get("/api/track-order", params={"orderNumber": created["orderNumber"], "phone": "9999999999"})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Order not found. Please check your details."}


def test_track_upper_cases_order_number(client, place_order):
    created = place_order()
    resp = client.get("/api/track-order", params={"orderNumber": created["orderNumber"].lower(), "phone": "9876543210"})
    assert resp.status_code == 200


def test_track_requires_both_fields(client):
    resp = client.get("/api/track-order", params={"orderNumber": "ORD1"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Order number and phone required"
