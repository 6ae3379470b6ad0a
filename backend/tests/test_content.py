from storefront.application.content import DEFAULT_CONTENT


def test_missing_content_is_404(client):
    resp = client.get("/api/v1/content/privacy-policy")

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "No content found for privacy-policy"


def test_upsert_then_read_publicly(client, admin_headers, admin_user):
    resp = client.put(
        "/api/v1/content/privacy-policy",
        json={"title": "Privacy", "content": "<p>We respect your data.</p>"},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.get_json()["data"]["updatedBy"]["id"] == admin_user.id

    public = client.get("/api/v1/content/privacy-policy").get_json()["data"]
    assert public["title"] == "Privacy"
    assert "updatedBy" not in public


def test_upsert_replaces_existing_page(client, admin_headers):
    for title in ("First", "Second"):
        client.put(
            "/api/v1/content/buyer-faq",
            json={"title": title, "content": "<p>body</p>"},
            headers=admin_headers,
        )

    listing = client.get("/api/v1/content", headers=admin_headers).get_json()
    assert listing["results"] == 1
    assert listing["data"][0]["title"] == "Second"


def test_upsert_requires_title_and_content(client, admin_headers):
    resp = client.put("/api/v1/content/buyer-faq", json={"title": "FAQ"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Title and content are required"


def test_upsert_rejects_unknown_type(client, admin_headers):
    resp = client.put(
        "/api/v1/content/returns",
        json={"title": "Returns", "content": "<p>none</p>"},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_upsert_requires_admin(client, user_headers):
    resp = client.put(
        "/api/v1/content/buyer-faq",
        json={"title": "FAQ", "content": "x"},
        headers=user_headers,
    )
    assert resp.status_code == 403


def test_seed_creates_only_missing_pages(client, admin_headers):
    client.put(
        "/api/v1/content/seller-faq",
        json={"title": "Custom", "content": "<p>custom</p>"},
        headers=admin_headers,
    )

    resp = client.post("/api/v1/content/seed", headers=admin_headers)

    assert resp.status_code == 201
    assert resp.get_json()["results"] == len(DEFAULT_CONTENT) - 1
    seller = client.get("/api/v1/content/seller-faq").get_json()["data"]
    assert seller["title"] == "Custom"
