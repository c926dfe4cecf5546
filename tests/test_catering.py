import re
from urllib.parse import unquote

import pytest

from livingroom.models.sql_models import CateringInquiry

INQUIRY = {
    "name": "Kavya",
    "phone": "9123456789",
    "email": "kavya@example.com",
    "eventType": "birthday",
    "eventDate": "2026-12-05",
    "guestCount": "60",
    "venue": "Koregaon Park",
    "requirements": "Jain options",
}


def test_inquiry_saved_as_pending(client, db_session):
    resp = client.post("/api/catering-inquiry", json=INQUIRY)
    assert resp.status_code == 200
    body = resp.json()
    assert re.fullmatch(r"CAT\d{13}\d{3}", body["inquiryNumber"])
    assert body["data"]["status"] == "pending"
    assert body["data"]["guest_count"] == 60
    assert body["emailSent"] is False

    row = db_session.query(CateringInquiry).one()
    assert row.inquiry_number == body["inquiryNumber"]
    assert row.budget is None


def test_inquiry_whatsapp_message(client):
    body = client.post("/api/catering-inquiry", json=INQUIRY).json()
    assert body["whatsappUrl"].startswith("https://wa.me/919285555002?text=")
    message = unquote(body["whatsappUrl"].split("?text=", 1)[1])
    assert "Type: BIRTHDAY" in message
    assert body["inquiryNumber"] in message


@pytest.mark.parametrize("field", ["name", "phone", "eventDate"])
def test_inquiry_required_fields(client, field):
    payload = {k: v for k, v in INQUIRY.items() if k != field}
    resp = client.post("/api/catering-inquiry", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields"


@pytest.mark.parametrize("phone", ["912345678", "91234567890", "91234abcde", "9123456789\n", "९१२३४५६७८९"])
def test_inquiry_phone_must_be_ten_digits(client, phone):
    resp = client.post("/api/catering-inquiry", json={**INQUIRY, "phone": phone})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid phone number"


def test_list_inquiries(client):
    client.post("/api/catering-inquiry", json=INQUIRY)
    client.post("/api/catering-inquiry", json={**INQUIRY, "name": "Rohan"})
    data = client.get("/api/catering-inquiry").json()["data"]
    assert {d["customer_name"] for d in data} == {"Kavya", "Rohan"}
