import copy
from typing import Any, Dict, List, Tuple

from sqlalchemy.orm.attributes import flag_modified

from storefront.domain.invariants.fields import assert_boolean
from storefront.domain.invariants.ordering import assert_unique_ids
from storefront.errors import NotFoundError, ValidationError
from storefront.extensions import db
from storefront.models.base import new_id
from storefront.models.navbar import Navbar
from storefront.utils.media import delete_file, save_file
from storefront.utils.order import apply_order, compact_order, next_order
from storefront.utils.request_data import item_id
from storefront.utils.transaction import transactional

DEFAULT_LOGO = "/Tangerine-Logo-200px.png"

MENU_ITEM_FIELDS = ("name", "url", "order", "isActive", "isMegaMenu", "isHighlighted")
MEGA_MENU_FIELDS = ("menuItemId", "image", "isServiceMenu")
CATEGORY_FIELDS = ("name", "slug", "order", "isActive", "image")
FLAG_FIELDS = {
    "searchEnabled": "search_enabled",
    "wishlistEnabled": "wishlist_enabled",
    "cartEnabled": "cart_enabled",
    "userEnabled": "user_enabled",
}

SEED_MENU_ITEMS = [
    ("Home", "/", False, False),
    ("Just In", "/collections", False, False),
    ("Women", "#", True, False),
    ("Men", "#", True, False),
    ("Kids", "#", True, False),
    ("Services", "#", True, False),
    ("Sale", "/sale-items", False, True),
    ("Contact", "/contact", False, False),
    ("Sell With Us", "/sell-with-us", False, False),
]

SEED_MEGA_MENUS = {
    "Women": (False, [
        ("Bags", "women-bags"),
        ("Shoes", "women-shoes"),
        ("Clothing", "women-clothing"),
        ("Accessories", "women-accessories"),
        ("Jewelry", "women-jewelry"),
    ]),
    "Men": (False, [
        ("Bags", "men-bags"),
        ("Shoes", "men-shoes"),
        ("Clothing", "men-clothing"),
        ("Accessories", "men-accessories"),
        ("Watches", "men-watches"),
    ]),
    "Kids": (False, [
        ("Bags", "kids-bags"),
        ("Shoes", "kids-shoes"),
        ("Clothing", "kids-clothing"),
        ("Accessories", "kids-accessories"),
    ]),
    "Services": (True, [
        ("Authentication", "authentication"),
        ("Bio Cleaning", "bio-cleaning"),
        ("Private Viewing", "private-viewing"),
        ("Request Product", "request-product"),
    ]),
}


# -------------------------------
# Nested item builders
# -------------------------------

def _pick(data: Dict[str, Any], fields) -> Dict[str, Any]:
    return {field: data[field] for field in fields if field in data}


def build_category(data: Dict[str, Any]) -> Dict[str, Any]:
    category = {"id": item_id(data) or new_id(), "isActive": True}
    category.update(_pick(data, CATEGORY_FIELDS))
    return category


def build_menu_item(data: Dict[str, Any]) -> Dict[str, Any]:
    menu_item = {
        "id": item_id(data) or new_id(),
        "isActive": True,
        "isMegaMenu": False,
        "isHighlighted": False,
    }
    menu_item.update(_pick(data, MENU_ITEM_FIELDS))
    return menu_item


def build_mega_menu(data: Dict[str, Any]) -> Dict[str, Any]:
    mega_menu = {"id": item_id(data) or new_id(), "isServiceMenu": False}
    mega_menu.update(_pick(data, MEGA_MENU_FIELDS))
    mega_menu["categories"] = [build_category(c) for c in data.get("categories") or []]
    return mega_menu


def _find(items: List[Dict[str, Any]], target_id: str, label: str) -> Dict[str, Any]:
    for item in items:
        if item.get("id") == target_id:
            return item
    raise NotFoundError(f"{label} not found")


# -------------------------------
# Navbar document
# -------------------------------

def get_navbar() -> Navbar:
    navbar = Navbar.current()
    if not navbar:
        raise NotFoundError("Navbar not found")
    return navbar


def _save(navbar: Navbar, menu_items=None, mega_menus=None) -> Navbar:
    with transactional():
        if menu_items is not None:
            navbar.menu_items = menu_items
            flag_modified(navbar, "menu_items")
        if mega_menus is not None:
            navbar.mega_menus = mega_menus
            flag_modified(navbar, "mega_menus")
    return navbar


def update_navbar(*, data: Dict[str, Any], logo_file=None) -> Tuple[Navbar, bool]:
    """
    Replace top-level navbar fields. Creates the navbar when absent.

    Returns ``(navbar, created)``.
    """
    navbar = Navbar.current()
    created = navbar is None

    logo = data.get("logo")
    if logo_file is not None:
        logo = save_file(logo_file, subfolder="navbar")

    menu_items = None
    if "menuItems" in data:
        menu_items = [build_menu_item(m) for m in data["menuItems"] or []]
        assert_unique_ids(menu_items, "Menu items")

    mega_menus = None
    if "megaMenus" in data:
        mega_menus = [build_mega_menu(m) for m in data["megaMenus"] or []]
        assert_unique_ids(mega_menus, "Mega menus")

    if created:
        if not logo:
            raise ValidationError("Logo is required")
        navbar = Navbar(logo=logo, menu_items=[], mega_menus=[])
        db.session.add(navbar)
    elif logo:
        if logo_file is not None and navbar.logo != logo:
            delete_file(navbar.logo)
        navbar.logo = logo

    for key, attr in FLAG_FIELDS.items():
        if key in data:
            setattr(navbar, attr, data[key])

    return _save(navbar, menu_items, mega_menus), created


def seed_navbar() -> Navbar:
    if Navbar.query.count() > 0:
        raise ValidationError("Navbar already exists")

    menu_items = []
    for order, (name, url, is_mega_menu, is_highlighted) in enumerate(SEED_MENU_ITEMS, start=1):
        menu_items.append(build_menu_item({
            "name": name,
            "url": url,
            "order": order,
            "isActive": True,
            "isMegaMenu": is_mega_menu,
            "isHighlighted": is_highlighted,
        }))

    mega_menus = []
    for menu_item in menu_items:
        seed = SEED_MEGA_MENUS.get(menu_item["name"])
        if seed is None:
            continue
        is_service_menu, categories = seed
        mega_menus.append(build_mega_menu({
            "menuItemId": menu_item["id"],
            "isServiceMenu": is_service_menu,
            "categories": [
                {"name": name, "slug": slug, "order": order, "isActive": True}
                for order, (name, slug) in enumerate(categories, start=1)
            ],
        }))

    navbar = Navbar(logo=DEFAULT_LOGO, menu_items=menu_items, mega_menus=mega_menus)

    with transactional():
        db.session.add(navbar)

    return navbar


# -------------------------------
# Menu items
# -------------------------------

def add_menu_item(*, data: Dict[str, Any]) -> Navbar:
    navbar = get_navbar()
    menu_items = copy.deepcopy(navbar.menu_items or [])

    menu_item = build_menu_item(data)
    menu_item["id"] = new_id()
    menu_item["order"] = next_order(menu_items)
    menu_item["isActive"] = True
    menu_items.append(menu_item)

    return _save(navbar, menu_items=menu_items)


def update_menu_item(*, menu_item_id: str, data: Dict[str, Any]) -> Navbar:
    navbar = get_navbar()
    menu_items = copy.deepcopy(navbar.menu_items or [])

    menu_item = _find(menu_items, menu_item_id, "Menu item")
    menu_item.update(_pick(data, MENU_ITEM_FIELDS))

    return _save(navbar, menu_items=menu_items)


def delete_menu_item(*, menu_item_id: str) -> Navbar:
    """Remove a menu item with its mega menu and renumber the rest."""
    navbar = get_navbar()

    menu_items = [m for m in copy.deepcopy(navbar.menu_items or []) if m.get("id") != menu_item_id]
    mega_menus = [m for m in copy.deepcopy(navbar.mega_menus or []) if m.get("menuItemId") != menu_item_id]
    compact_order(menu_items)

    return _save(navbar, menu_items=menu_items, mega_menus=mega_menus)


def reorder_menu_items(*, items: Any) -> Navbar:
    if not isinstance(items, list):
        raise ValidationError("Expected an array of menu items")

    navbar = get_navbar()
    menu_items = copy.deepcopy(navbar.menu_items or [])
    apply_order(menu_items, [item_id(item) for item in items])

    return _save(navbar, menu_items=menu_items)


def toggle_menu_item(*, menu_item_id: str, is_active: Any) -> Navbar:
    assert_boolean("isActive", is_active)

    navbar = get_navbar()
    menu_items = copy.deepcopy(navbar.menu_items or [])
    _find(menu_items, menu_item_id, "Menu item")["isActive"] = is_active

    return _save(navbar, menu_items=menu_items)


# -------------------------------
# Mega menus
# -------------------------------

def add_mega_menu(*, data: Dict[str, Any], image_file=None) -> Navbar:
    """Create or merge the mega menu attached to ``menuItemId``."""
    navbar = get_navbar()
    menu_items = copy.deepcopy(navbar.menu_items or [])
    mega_menus = copy.deepcopy(navbar.mega_menus or [])

    menu_item_id = data.get("menuItemId")
    if not menu_item_id:
        raise ValidationError("menuItemId is required")

    payload = dict(data)
    if image_file is not None:
        payload["image"] = save_file(image_file, subfolder="navbar")

    existing = next((m for m in mega_menus if m.get("menuItemId") == menu_item_id), None)
    if existing is not None:
        existing.update(_pick(payload, MEGA_MENU_FIELDS))
        if payload.get("categories"):
            existing["categories"] = [build_category(c) for c in payload["categories"]]
    else:
        payload.pop("id", None)
        payload.pop("_id", None)
        mega_menus.append(build_mega_menu(payload))
        for menu_item in menu_items:
            if menu_item.get("id") == menu_item_id:
                menu_item["isMegaMenu"] = True

    return _save(navbar, menu_items=menu_items, mega_menus=mega_menus)


def update_mega_menu(*, mega_menu_id: str, data: Dict[str, Any], image_file=None) -> Navbar:
    navbar = get_navbar()
    mega_menus = copy.deepcopy(navbar.mega_menus or [])
    mega_menu = _find(mega_menus, mega_menu_id, "Mega menu")

    payload = dict(data)
    if image_file is not None:
        payload["image"] = save_file(image_file, subfolder="navbar")

    mega_menu.update(_pick(payload, MEGA_MENU_FIELDS))
    if payload.get("categories"):
        mega_menu["categories"] = [build_category(c) for c in payload["categories"]]

    return _save(navbar, mega_menus=mega_menus)


def delete_mega_menu(*, mega_menu_id: str) -> Navbar:
    navbar = get_navbar()
    menu_items = copy.deepcopy(navbar.menu_items or [])
    mega_menus = copy.deepcopy(navbar.mega_menus or [])

    mega_menu = _find(mega_menus, mega_menu_id, "Mega menu")
    for menu_item in menu_items:
        if menu_item.get("id") == mega_menu.get("menuItemId"):
            menu_item["isMegaMenu"] = False

    mega_menus = [m for m in mega_menus if m.get("id") != mega_menu_id]

    return _save(navbar, menu_items=menu_items, mega_menus=mega_menus)


# -------------------------------
# Mega menu categories
# -------------------------------

def _categories_of(navbar: Navbar, mega_menu_id: str):
    mega_menus = copy.deepcopy(navbar.mega_menus or [])
    mega_menu = _find(mega_menus, mega_menu_id, "Mega menu")
    mega_menu.setdefault("categories", [])
    return mega_menus, mega_menu


def add_category(*, mega_menu_id: str, data: Dict[str, Any]) -> Navbar:
    navbar = get_navbar()
    mega_menus, mega_menu = _categories_of(navbar, mega_menu_id)

    category = build_category(data)
    category["id"] = new_id()
    category["order"] = next_order(mega_menu["categories"])
    category["isActive"] = True
    mega_menu["categories"].append(category)

    return _save(navbar, mega_menus=mega_menus)


def update_category(*, mega_menu_id: str, category_id: str, data: Dict[str, Any]) -> Navbar:
    navbar = get_navbar()
    mega_menus, mega_menu = _categories_of(navbar, mega_menu_id)

    category = _find(mega_menu["categories"], category_id, "Category")
    category.update(_pick(data, CATEGORY_FIELDS))

    return _save(navbar, mega_menus=mega_menus)


def delete_category(*, mega_menu_id: str, category_id: str) -> Navbar:
    navbar = get_navbar()
    mega_menus, mega_menu = _categories_of(navbar, mega_menu_id)

    mega_menu["categories"] = compact_order(
        [c for c in mega_menu["categories"] if c.get("id") != category_id]
    )

    return _save(navbar, mega_menus=mega_menus)


def reorder_categories(*, mega_menu_id: str, items: Any) -> Navbar:
    if not isinstance(items, list):
        raise ValidationError("Expected an array of categories")

    navbar = get_navbar()
    mega_menus, mega_menu = _categories_of(navbar, mega_menu_id)
    apply_order(mega_menu["categories"], [item_id(item) for item in items])

    return _save(navbar, mega_menus=mega_menus)


def toggle_category(*, mega_menu_id: str, category_id: str, is_active: Any) -> Navbar:
    assert_boolean("isActive", is_active)

    navbar = get_navbar()
    mega_menus, mega_menu = _categories_of(navbar, mega_menu_id)
    _find(mega_menu["categories"], category_id, "Category")["isActive"] = is_active

    return _save(navbar, mega_menus=mega_menus)
