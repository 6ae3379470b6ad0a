from unittest.mock import patch

import pytest

from storefront.models.contact_submission import ContactSubmission

FORM = {
    "name": "Ananya",
    "email": "ananya@example.com",
    "subject": "Authentication",
    "message": "Can you authenticate a Kelly bag?",
}


@pytest.fixture
def submission(app):
    from storefront.application.contact_submissions import create_submission

    return create_submission(data=dict(FORM))


def test_create_submission_is_public(client):
    resp = client.post("/api/v1/contact-submissions", json=FORM)

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["status"] == "new"
    assert data["subject"] == "Authentication"
    assert ContactSubmission.query.count() == 1


def test_create_submission_requires_all_fields(client):
    resp = client.post("/api/v1/contact-submissions", json={"name": "Ananya"})

    assert resp.status_code == 400
    assert "email" in resp.get_json()["message"]


def test_create_submission_rejects_non_text_fields(client):
    resp = client.post("/api/v1/contact-submissions", json={**FORM, "name": 123})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Fields must be text: name"
    assert ContactSubmission.query.count() == 0


def test_create_submission_sends_admin_and_auto_reply(client, app):
    app.config["ADMIN_EMAIL"] = "admin@tangerineluxury.com"

    with patch("storefront.services.email.Mailer.send") as send:
        client.post("/api/v1/contact-submissions", json=FORM)

    recipients = [call.args[0] for call in send.call_args_list]
    subjects = [call.args[1] for call in send.call_args_list]
    assert recipients == ["admin@tangerineluxury.com", "ananya@example.com"]
    assert subjects == ["New Contact Form Submission: Authentication", "Thank you for contacting us"]


def test_mail_failure_does_not_fail_submission(client):
    with patch("storefront.services.email.Mailer.send", side_effect=OSError("smtp down")):
        resp = client.post("/api/v1/contact-submissions", json=FORM)

    assert resp.status_code == 201


def test_list_requires_authentication(client):
    assert client.get("/api/v1/contact-submissions").status_code == 401


def test_list_requires_admin(client, user_headers):
    assert client.get("/api/v1/contact-submissions", headers=user_headers).status_code == 403


def test_admin_lists_submissions(client, admin_headers, submission):
    resp = client.get("/api/v1/contact-submissions", headers=admin_headers)

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["results"] == 1
    assert body["data"][0]["id"] == submission.id


def test_update_status(client, admin_headers, submission):
    resp = client.patch(
        f"/api/v1/contact-submissions/{submission.id}/status",
        json={"status": "responded"},
        headers=admin_headers,
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["status"] == "responded"


def test_update_status_rejects_unknown_value(client, admin_headers, submission):
    resp = client.patch(
        f"/api/v1/contact-submissions/{submission.id}/status",
        json={"status": "archived"},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_update_status_unknown_submission(client, admin_headers):
    resp = client.patch(
        "/api/v1/contact-submissions/missing/status",
        json={"status": "read"},
        headers=admin_headers,
    )

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Submission not found"
