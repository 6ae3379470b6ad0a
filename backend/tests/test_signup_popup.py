import io

from storefront.models.signup_popup import SignupPopup


def test_get_creates_defaults(client):
    resp = client.get("/api/v1/signup-popup")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["title"] == "Exclusive Offer!"
    assert data["discountAmount"] == 2000
    assert data["minimumOrderAmount"] == 15000
    assert data["couponCode"] == "WELCOME20"
    assert data["enabled"] is True
    assert SignupPopup.query.count() == 1


def test_get_is_idempotent(client):
    first = client.get("/api/v1/signup-popup").get_json()["data"]["id"]
    second = client.get("/api/v1/signup-popup").get_json()["data"]["id"]

    assert first == second


def test_put_creates_when_missing(client, admin_headers):
    resp = client.put("/api/v1/signup-popup", json={"title": "Welcome"}, headers=admin_headers)

    assert resp.status_code == 201
    assert resp.get_json()["data"]["title"] == "Welcome"


def test_put_updates_existing(client, admin_headers):
    client.get("/api/v1/signup-popup")

    resp = client.put(
        "/api/v1/signup-popup",
        json={"discountAmount": 3000, "couponCode": "VIP30"},
        headers=admin_headers,
    )

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["discountAmount"] == 3000
    assert data["couponCode"] == "VIP30"
    assert data["minimumOrderAmount"] == 15000


def test_put_multipart_coerces_values(client, admin_headers):
    resp = client.put(
        "/api/v1/signup-popup",
        data={
            "discountAmount": "2500",
            "enabled": "false",
            "backgroundImage": (io.BytesIO(b"GIF89a"), "bg.gif"),
        },
        content_type="multipart/form-data",
        headers=admin_headers,
    )

    data = resp.get_json()["data"]
    assert data["discountAmount"] == 2500
    assert data["enabled"] is False
    assert data["backgroundImage"].startswith("/uploads/signup-popup/")


def test_put_rejects_bad_number(client, admin_headers):
    resp = client.put("/api/v1/signup-popup", json={"showDelayMs": "soon"}, headers=admin_headers)
    assert resp.status_code == 400


def test_put_rejects_null_field(client, admin_headers):
    resp = client.put("/api/v1/signup-popup", json={"title": None}, headers=admin_headers)
    assert resp.status_code == 400


def test_put_requires_admin(client, user_headers):
    assert client.put("/api/v1/signup-popup", json={"title": "x"}, headers=user_headers).status_code == 403


def test_toggle(client, admin_headers):
    resp = client.patch("/api/v1/signup-popup/toggle", json={"enabled": False}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.get_json()["data"]["enabled"] is False
    assert client.get("/api/v1/signup-popup").get_json()["data"]["enabled"] is False


def test_toggle_requires_boolean(client, admin_headers):
    resp = client.patch("/api/v1/signup-popup/toggle", json={"enabled": "off"}, headers=admin_headers)
    assert resp.status_code == 400


def test_seed_only_once(client, admin_headers):
    assert client.post("/api/v1/signup-popup/seed", headers=admin_headers).status_code == 201

    resp = client.post("/api/v1/signup-popup/seed", headers=admin_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Signup popup already exists"
