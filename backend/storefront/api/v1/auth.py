from flask import request
from flask_jwt_extended import create_access_token, get_current_user, jwt_required
from storefront.errors import error_response
from storefront.models.user import User
from storefront.normalizers.user import normalize_user
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        return error_response("Invalid request body", 400)

    email = (data.get("email") or "").strip().lower()
    password = data.get("password")

    if not email or not password:
        return error_response("Email and password required", 400)

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return error_response("Invalid credentials", 401)

    if not user.is_active:
        return error_response("User account disabled", 403)

    access_token = create_access_token(
        identity=user.id,
        additional_claims={"role": user.role},
    )

    return success_response({
        "token": access_token,
        "user": normalize_user(user),
    })


@v1_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return success_response(normalize_user(get_current_user()))
