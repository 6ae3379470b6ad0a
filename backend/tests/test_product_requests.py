from unittest.mock import patch

import pytest

PAYLOAD = {
    "name": "Hermes Kelly 25",
    "description": "Gold hardware, Etoupe",
    "budget": "850000",
    "contactEmail": "collector@example.com",
    "contactPhone": "9876501234",
}


@pytest.fixture
def own_request(client, user_headers):
    resp = client.post("/api/v1/product-requests", json=PAYLOAD, headers=user_headers)
    return resp.get_json()["data"]["productRequest"]


def test_guest_can_create_request(client):
    resp = client.post("/api/v1/product-requests", json=PAYLOAD)

    assert resp.status_code == 201
    data = resp.get_json()["data"]["productRequest"]
    assert data["isGuest"] is True
    assert data["requestedBy"] is None
    assert data["budget"] == 850000.0
    assert data["status"] == "pending"
    assert "adminNotes" not in data


def test_signed_in_request_is_linked(own_request, customer):
    assert own_request["isGuest"] is False
    assert own_request["requestedBy"]["id"] == customer.id


def test_create_requires_fields(client):
    resp = client.post("/api/v1/product-requests", json={"name": "Kelly"})

    assert resp.status_code == 400
    assert "contactEmail" in resp.get_json()["message"]


def test_create_rejects_non_numeric_budget(client):
    resp = client.post("/api/v1/product-requests", json={**PAYLOAD, "budget": "a lot"})
    assert resp.status_code == 400


def test_create_sends_consignment_and_confirmation(client, app):
    app.config["CONSIGN_EMAIL"] = "consign@example.com"

    with patch("storefront.services.email.Mailer.send") as send:
        client.post("/api/v1/product-requests", json=PAYLOAD)

    assert [call.args[0] for call in send.call_args_list] == ["consign@example.com", "collector@example.com"]
    assert send.call_args_list[0].args[1] == "New Product Request: Hermes Kelly 25"


def test_my_requests(client, user_headers, own_request):
    client.post("/api/v1/product-requests", json=PAYLOAD)

    resp = client.get("/api/v1/product-requests/my-requests", headers=user_headers)

    body = resp.get_json()
    assert body["results"] == 1
    assert body["data"]["productRequests"][0]["id"] == own_request["id"]


def test_owner_can_read_request(client, user_headers, own_request):
    resp = client.get(f"/api/v1/product-requests/{own_request['id']}", headers=user_headers)
    assert resp.status_code == 200


def test_other_user_cannot_read_request(client, app, own_request):
    from flask_jwt_extended import create_access_token
    from storefront.extensions import db
    from storefront.models.user import User

    other = User(name="Other", email="other@example.com")
    other.set_password("secret123")
    db.session.add(other)
    db.session.commit()
    token = create_access_token(identity=other.id, additional_claims={"role": "user"})

    resp = client.get(
        f"/api/v1/product-requests/{own_request['id']}",
        headers={"Authorization": f"Bearer {token}"},
    )

    assert resp.status_code == 403


def test_admin_reads_request_with_notes(client, admin_headers, own_request):
    resp = client.get(f"/api/v1/product-requests/{own_request['id']}", headers=admin_headers)

    assert resp.status_code == 200
    assert "adminNotes" in resp.get_json()["data"]["productRequest"]


def test_unknown_request_is_404(client, admin_headers):
    assert client.get("/api/v1/product-requests/missing", headers=admin_headers).status_code == 404


def test_admin_list_filters_by_status(client, admin_headers, own_request):
    client.patch(
        f"/api/v1/product-requests/{own_request['id']}",
        json={"status": "approved", "adminNotes": "Sourcing from Paris"},
        headers=admin_headers,
    )
    client.post("/api/v1/product-requests", json=PAYLOAD)

    approved = client.get("/api/v1/product-requests?status=approved", headers=admin_headers).get_json()
    everything = client.get("/api/v1/product-requests", headers=admin_headers).get_json()

    assert approved["results"] == 1
    assert approved["data"]["productRequests"][0]["adminNotes"] == "Sourcing from Paris"
    assert everything["results"] == 2


def test_admin_list_requires_admin(client, user_headers):
    assert client.get("/api/v1/product-requests", headers=user_headers).status_code == 403


def test_update_rejects_unknown_status(client, admin_headers, own_request):
    resp = client.patch(
        f"/api/v1/product-requests/{own_request['id']}",
        json={"status": "shipped"},
        headers=admin_headers,
    )
    assert resp.status_code == 400
