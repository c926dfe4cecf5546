import pytest


@pytest.fixture
def user_id(client):
    return client.post("/api/auth/login", json={"phone": "9876543210"}).json()["user"]["id"]


def address(user_id, **overrides):
    data = {
        "userId": user_id,
        "address_line1": "12 MG Road",
        "city": "Pune",
        "state": "Maharashtra",
        "pincode": "411001",
    }
    data.update(overrides)
    return data


def test_address_lifecycle(client, user_id):
    created = client.post("/api/addresses", json=address(user_id, landmark="Near the clock tower"))
    assert created.status_code == 200
    addr = created.json()["address"]
    assert addr["label"] == "Home"
    assert addr["is_default"] is False

    updated = client.put(f"/api/addresses/{addr['id']}", json={"label": "Work", "is_default": True}).json()["address"]
    assert updated["label"] == "Work"
    assert updated["is_default"] is True
    assert updated["city"] == "Pune"

    listed = client.get("/api/addresses", params={"userId": user_id}).json()["addresses"]
    assert [a["id"] for a in listed] == [addr["id"]]

    assert client.delete(f"/api/addresses/{addr['id']}").status_code == 200
    assert client.get("/api/addresses", params={"userId": user_id}).json()["addresses"] == []
    assert client.delete(f"/api/addresses/{addr['id']}").status_code == 404


def test_second_default_does_not_clear_first(client, user_id):
    client.post("/api/addresses", json=address(user_id, is_default=True))
    client.post("/api/addresses", json=address(user_id, label="Work", is_default=True))
    listed = client.get("/api/addresses", params={"userId": user_id}).json()["addresses"]
    assert [a["is_default"] for a in listed] == [True, True]


def test_address_requires_fields(client, user_id):
    resp = client.post("/api/addresses", json=address(user_id, pincode=""))
    assert resp.status_code == 400
    assert client.get("/api/addresses").status_code == 400
    assert client.put("/api/addresses/999", json={"label": "x"}).status_code == 404
