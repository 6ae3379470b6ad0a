import io

import pytest

from storefront.application.navbar import DEFAULT_LOGO, SEED_MENU_ITEMS


@pytest.fixture
def seeded(client, admin_headers):
    resp = client.post("/api/v1/navbar/seed", headers=admin_headers)
    assert resp.status_code == 201
    return resp.get_json()["data"]


def _item(navbar, name):
    return next(m for m in navbar["menuItems"] if m["name"] == name)


def _mega_for(navbar, menu_item_id):
    return next(m for m in navbar["megaMenus"] if m["menuItemId"] == menu_item_id)


def test_get_navbar_before_seed_is_404(client):
    assert client.get("/api/v1/navbar").status_code == 404


def test_seed_builds_menu_items_and_mega_menus(seeded):
    assert seeded["logo"] == DEFAULT_LOGO
    assert [m["name"] for m in seeded["menuItems"]] == [name for name, *_ in SEED_MENU_ITEMS]
    assert [m["order"] for m in seeded["menuItems"]] == list(range(1, len(SEED_MENU_ITEMS) + 1))

    services = _mega_for(seeded, _item(seeded, "Services")["id"])
    assert services["isServiceMenu"] is True
    assert [c["slug"] for c in services["categories"]][:2] == ["authentication", "bio-cleaning"]
    assert _item(seeded, "Sale")["isHighlighted"] is True


def test_seed_twice_is_rejected(client, admin_headers, seeded):
    resp = client.post("/api/v1/navbar/seed", headers=admin_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Navbar already exists"


def test_patch_creates_navbar_from_json(client, admin_headers):
    resp = client.patch(
        "/api/v1/navbar",
        json={"logo": "/logo.png", "menuItems": [{"name": "Home", "url": "/", "order": 1}]},
        headers=admin_headers,
    )

    assert resp.status_code == 201
    assert resp.get_json()["data"]["menuItems"][0]["isActive"] is True


def test_patch_create_without_logo_is_rejected(client, admin_headers):
    resp = client.patch("/api/v1/navbar", json={"menuItems": []}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Logo is required"


def test_patch_multipart_with_logo_upload(client, admin_headers, seeded):
    resp = client.patch(
        "/api/v1/navbar",
        data={
            "logo": (io.BytesIO(b"\x89PNG fake"), "brand logo.png"),
            "cartEnabled": "false",
            "menuItems": '[{"name": "Home", "url": "/", "order": 1}]',
        },
        content_type="multipart/form-data",
        headers=admin_headers,
    )

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["logo"].startswith("/uploads/navbar/")
    assert data["logo"].endswith(".png")
    assert data["cartEnabled"] is False
    assert [m["name"] for m in data["menuItems"]] == ["Home"]

    assert client.get(data["logo"]).status_code == 200


def test_patch_rejects_non_boolean_flag(client, admin_headers, seeded):
    resp = client.patch("/api/v1/navbar", json={"searchEnabled": "maybe"}, headers=admin_headers)
    assert resp.status_code == 400


def test_patch_rejects_duplicate_menu_item_ids(client, admin_headers, seeded):
    resp = client.patch(
        "/api/v1/navbar",
        json={"menuItems": [{"id": "a", "name": "One"}, {"id": "a", "name": "Two"}]},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_add_menu_item_appends_with_next_order(client, admin_headers, seeded):
    resp = client.post(
        "/api/v1/navbar/menu-items",
        json={"name": "Journal", "url": "/journal", "order": 1},
        headers=admin_headers,
    )

    assert resp.status_code == 201
    journal = _item(resp.get_json()["data"], "Journal")
    assert journal["order"] == len(SEED_MENU_ITEMS) + 1
    assert journal["isActive"] is True


def test_update_menu_item(client, admin_headers, seeded):
    home_id = _item(seeded, "Home")["id"]

    resp = client.patch(
        f"/api/v1/navbar/menu-items/{home_id}",
        json={"name": "Start", "bogus": "ignored"},
        headers=admin_headers,
    )

    item = _item(resp.get_json()["data"], "Start")
    assert item["id"] == home_id
    assert "bogus" not in item


def test_update_unknown_menu_item_is_404(client, admin_headers, seeded):
    resp = client.patch("/api/v1/navbar/menu-items/missing", json={"name": "x"}, headers=admin_headers)
    assert resp.status_code == 404


def test_delete_menu_item_renumbers_and_drops_mega_menu(client, admin_headers, seeded):
    women_id = _item(seeded, "Women")["id"]

    resp = client.delete(f"/api/v1/navbar/menu-items/{women_id}", headers=admin_headers)

    data = resp.get_json()["data"]
    assert "Women" not in [m["name"] for m in data["menuItems"]]
    assert [m["order"] for m in data["menuItems"]] == list(range(1, len(SEED_MENU_ITEMS)))
    assert women_id not in [m["menuItemId"] for m in data["megaMenus"]]


def test_reorder_menu_items(client, admin_headers, seeded):
    ids = [m["id"] for m in seeded["menuItems"]]
    reversed_ids = list(reversed(ids))

    resp = client.patch(
        "/api/v1/navbar/menu-items-order",
        json=[{"_id": item_id} for item_id in reversed_ids],
        headers=admin_headers,
    )

    data = resp.get_json()["data"]
    assert [m["id"] for m in data["menuItems"]] == reversed_ids
    assert data["menuItems"][0]["order"] == 1


def test_reorder_requires_array(client, admin_headers, seeded):
    resp = client.patch("/api/v1/navbar/menu-items-order", json={"id": "x"}, headers=admin_headers)
    assert resp.status_code == 400


def test_toggle_menu_item(client, admin_headers, seeded):
    home_id = _item(seeded, "Home")["id"]

    resp = client.patch(
        f"/api/v1/navbar/menu-items/{home_id}/toggle",
        json={"isActive": False},
        headers=admin_headers,
    )
    assert _item(resp.get_json()["data"], "Home")["isActive"] is False


def test_toggle_menu_item_requires_boolean(client, admin_headers, seeded):
    home_id = _item(seeded, "Home")["id"]

    resp = client.patch(
        f"/api/v1/navbar/menu-items/{home_id}/toggle",
        json={"isActive": "false"},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_add_mega_menu_flags_menu_item(client, admin_headers, seeded):
    contact_id = _item(seeded, "Contact")["id"]

    resp = client.post(
        "/api/v1/navbar/mega-menus",
        json={"menuItemId": contact_id, "categories": [{"name": "Stores", "slug": "stores", "order": 1}]},
        headers=admin_headers,
    )

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert _item(data, "Contact")["isMegaMenu"] is True
    assert _mega_for(data, contact_id)["categories"][0]["slug"] == "stores"


def test_add_mega_menu_merges_existing(client, admin_headers, seeded):
    women_id = _item(seeded, "Women")["id"]
    before = len(seeded["megaMenus"])

    resp = client.post(
        "/api/v1/navbar/mega-menus",
        json={"menuItemId": women_id, "image": "/img/women.jpg"},
        headers=admin_headers,
    )

    data = resp.get_json()["data"]
    assert len(data["megaMenus"]) == before
    women = _mega_for(data, women_id)
    assert women["image"] == "/img/women.jpg"
    assert len(women["categories"]) == 5


def test_delete_mega_menu_clears_flag(client, admin_headers, seeded):
    kids_id = _item(seeded, "Kids")["id"]
    mega_id = _mega_for(seeded, kids_id)["id"]

    resp = client.delete(f"/api/v1/navbar/mega-menus/{mega_id}", headers=admin_headers)

    data = resp.get_json()["data"]
    assert _item(data, "Kids")["isMegaMenu"] is False
    assert mega_id not in [m["id"] for m in data["megaMenus"]]


def test_category_lifecycle(client, admin_headers, seeded):
    men = _mega_for(seeded, _item(seeded, "Men")["id"])
    base = f"/api/v1/navbar/mega-menus/{men['id']}/categories"

    added = client.post(base, json={"name": "Belts", "slug": "men-belts"}, headers=admin_headers)
    assert added.status_code == 201
    categories = _mega_for(added.get_json()["data"], _item(seeded, "Men")["id"])["categories"]
    belts = categories[-1]
    assert belts["order"] == 6

    first_id = categories[0]["id"]
    deleted = client.delete(f"{base}/{first_id}", headers=admin_headers)
    remaining = _mega_for(deleted.get_json()["data"], _item(seeded, "Men")["id"])["categories"]
    assert [c["order"] for c in remaining] == [1, 2, 3, 4, 5]
    assert first_id not in [c["id"] for c in remaining]

    toggled = client.patch(f"{base}/{belts['id']}/toggle", json={"isActive": False}, headers=admin_headers)
    updated = _mega_for(toggled.get_json()["data"], _item(seeded, "Men")["id"])["categories"]
    assert next(c for c in updated if c["id"] == belts["id"])["isActive"] is False


def test_reorder_categories(client, admin_headers, seeded):
    women_item_id = _item(seeded, "Women")["id"]
    women = _mega_for(seeded, women_item_id)
    reversed_ids = [c["id"] for c in reversed(women["categories"])]

    resp = client.patch(
        f"/api/v1/navbar/mega-menus/{women['id']}/categories-order",
        json=reversed_ids,
        headers=admin_headers,
    )

    categories = _mega_for(resp.get_json()["data"], women_item_id)["categories"]
    assert [c["id"] for c in categories] == reversed_ids


def test_navbar_mutations_require_admin(client, user_headers):
    assert client.post("/api/v1/navbar/seed", headers=user_headers).status_code == 403
    assert client.post("/api/v1/navbar/seed").status_code == 401
