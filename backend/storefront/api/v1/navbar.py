from flask import request
from flask_jwt_extended import jwt_required
from storefront.application import navbar as service
from storefront.normalizers.navbar import normalize_navbar
from storefront.utils.decorators import roles_required
from storefront.utils.request_data import coerce_bool, get_payload, parse_json_field
from storefront.utils.responses import success_response
from . import v1_bp

JSON_FIELDS = ("menuItems", "megaMenus", "categories")


def _navbar_payload():
    """JSON or multipart body with nested lists decoded and flags coerced."""
    data = get_payload()

    for field in JSON_FIELDS:
        if field in data:
            data[field] = parse_json_field(data[field], field)

    for field in service.FLAG_FIELDS:
        if field in data:
            data[field] = coerce_bool(data[field], field)

    if "isServiceMenu" in data:
        data["isServiceMenu"] = coerce_bool(data["isServiceMenu"], "isServiceMenu")

    return data


@v1_bp.route("/navbar", methods=["GET"])
def get_navbar():
    return success_response(normalize_navbar(service.get_navbar()))


@v1_bp.route("/navbar", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_navbar():
    navbar, created = service.update_navbar(
        data=_navbar_payload(),
        logo_file=request.files.get("logo"),
    )
    return success_response(normalize_navbar(navbar), 201 if created else 200)


@v1_bp.route("/navbar/seed", methods=["POST"])
@jwt_required()
@roles_required("admin")
def seed_navbar():
    navbar = service.seed_navbar()
    return success_response(normalize_navbar(navbar), 201, message="Navbar seeded successfully")


# ------------------------
# Menu items
# ------------------------

@v1_bp.route("/navbar/menu-items", methods=["POST"])
@jwt_required()
@roles_required("admin")
def add_menu_item():
    navbar = service.add_menu_item(data=request.get_json(silent=True) or {})
    return success_response(normalize_navbar(navbar), 201)


@v1_bp.route("/navbar/menu-items/<menu_item_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_menu_item(menu_item_id):
    navbar = service.update_menu_item(
        menu_item_id=menu_item_id,
        data=request.get_json(silent=True) or {},
    )
    return success_response(normalize_navbar(navbar))


@v1_bp.route("/navbar/menu-items/<menu_item_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_menu_item(menu_item_id):
    return success_response(normalize_navbar(service.delete_menu_item(menu_item_id=menu_item_id)))


@v1_bp.route("/navbar/menu-items-order", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def reorder_menu_items():
    navbar = service.reorder_menu_items(items=request.get_json(silent=True))
    return success_response(normalize_navbar(navbar))


@v1_bp.route("/navbar/menu-items/<menu_item_id>/toggle", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def toggle_menu_item(menu_item_id):
    data = request.get_json(silent=True) or {}
    navbar = service.toggle_menu_item(menu_item_id=menu_item_id, is_active=data.get("isActive"))
    return success_response(normalize_navbar(navbar))


# ------------------------
# Mega menus
# ------------------------

@v1_bp.route("/navbar/mega-menus", methods=["POST"])
@jwt_required()
@roles_required("admin")
def add_mega_menu():
    navbar = service.add_mega_menu(
        data=_navbar_payload(),
        image_file=request.files.get("megaMenuImage"),
    )
    return success_response(normalize_navbar(navbar), 201)


@v1_bp.route("/navbar/mega-menus/<mega_menu_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_mega_menu(mega_menu_id):
    navbar = service.update_mega_menu(
        mega_menu_id=mega_menu_id,
        data=_navbar_payload(),
        image_file=request.files.get("megaMenuImage"),
    )
    return success_response(normalize_navbar(navbar))


@v1_bp.route("/navbar/mega-menus/<mega_menu_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_mega_menu(mega_menu_id):
    return success_response(normalize_navbar(service.delete_mega_menu(mega_menu_id=mega_menu_id)))


# ------------------------
# Categories
# ------------------------

@v1_bp.route("/navbar/mega-menus/<mega_menu_id>/categories", methods=["POST"])
@jwt_required()
@roles_required("admin")
def add_category(mega_menu_id):
    navbar = service.add_category(
        mega_menu_id=mega_menu_id,
        data=request.get_json(silent=True) or {},
    )
    return success_response(normalize_navbar(navbar), 201)


@v1_bp.route("/navbar/mega-menus/<mega_menu_id>/categories/<category_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_category(mega_menu_id, category_id):
    navbar = service.update_category(
        mega_menu_id=mega_menu_id,
        category_id=category_id,
        data=request.get_json(silent=True) or {},
    )
    return success_response(normalize_navbar(navbar))


@v1_bp.route("/navbar/mega-menus/<mega_menu_id>/categories/<category_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_category(mega_menu_id, category_id):
    navbar = service.delete_category(mega_menu_id=mega_menu_id, category_id=category_id)
    return success_response(normalize_navbar(navbar))


@v1_bp.route("/navbar/mega-menus/<mega_menu_id>/categories-order", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def reorder_categories(mega_menu_id):
    navbar = service.reorder_categories(
        mega_menu_id=mega_menu_id,
        items=request.get_json(silent=True),
    )
    return success_response(normalize_navbar(navbar))


@v1_bp.route("/navbar/mega-menus/<mega_menu_id>/categories/<category_id>/toggle", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def toggle_category(mega_menu_id, category_id):
    data = request.get_json(silent=True) or {}
    navbar = service.toggle_category(
        mega_menu_id=mega_menu_id,
        category_id=category_id,
        is_active=data.get("isActive"),
    )
    return success_response(normalize_navbar(navbar))
