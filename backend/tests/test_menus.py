def test_create_menu(client, admin_headers, admin_user):
    resp = client.post(
        "/api/v1/menus",
        json={"code": 2, "name": "Women", "slug": "women"},
        headers=admin_headers,
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Menu created successfully"
    assert body["data"]["slug"] == "women"


def test_create_menu_requires_name_and_slug(client, admin_headers):
    resp = client.post("/api/v1/menus", json={"name": "Women"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Name and slug are required"


def test_create_menu_requires_admin(client, user_headers):
    resp = client.post("/api/v1/menus", json={"name": "Men", "slug": "men"}, headers=user_headers)
    assert resp.status_code == 403


def test_list_menus_ordered_by_code(client, admin_headers):
    client.post("/api/v1/menus", json={"code": 2, "name": "Men", "slug": "men"}, headers=admin_headers)
    client.post("/api/v1/menus", json={"code": 1, "name": "Women", "slug": "women"}, headers=admin_headers)

    resp = client.get("/api/v1/menus")

    assert resp.status_code == 200
    assert [m["name"] for m in resp.get_json()["data"]] == ["Women", "Men"]
