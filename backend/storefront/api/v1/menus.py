from flask import request
from flask_jwt_extended import get_jwt_identity, jwt_required
from storefront.application import menus as service
from storefront.normalizers.menu import normalize_menu
from storefront.utils.decorators import roles_required
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/menus", methods=["GET"])
def list_menus():
    menus = service.list_menus()
    return success_response([normalize_menu(m) for m in menus], results=len(menus))


@v1_bp.route("/menus", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_menu():
    menu = service.create_menu(
        data=request.get_json(silent=True) or {},
        actor_id=get_jwt_identity(),
    )
    return success_response(normalize_menu(menu), 201, message="Menu created successfully")
