from flask import request
from flask_jwt_extended import jwt_required
from storefront.application import signup_popup as service
from storefront.normalizers.signup_popup import normalize_signup_popup
from storefront.utils.decorators import roles_required
from storefront.utils.request_data import get_payload
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/signup-popup", methods=["GET"])
def get_signup_popup():
    return success_response(normalize_signup_popup(service.get_or_create_popup()))


@v1_bp.route("/signup-popup", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_signup_popup():
    popup, created = service.update_popup(
        data=get_payload(),
        background_file=request.files.get("backgroundImage"),
    )
    return success_response(normalize_signup_popup(popup), 201 if created else 200)


@v1_bp.route("/signup-popup/toggle", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def toggle_signup_popup():
    data = request.get_json(silent=True) or {}
    popup = service.toggle_popup(enabled=data.get("enabled"))
    return success_response(normalize_signup_popup(popup))


@v1_bp.route("/signup-popup/seed", methods=["POST"])
@jwt_required()
@roles_required("admin")
def seed_signup_popup():
    popup = service.seed_popup()
    return success_response(
        normalize_signup_popup(popup),
        201,
        message="Signup popup seeded successfully",
    )
