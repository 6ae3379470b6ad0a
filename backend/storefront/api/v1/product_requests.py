from flask import request
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required
from storefront.application import product_requests as service
from storefront.normalizers.product_request import normalize_product_request
from storefront.utils.decorators import roles_required
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/product-requests", methods=["POST"])
@jwt_required(optional=True)
def create_product_request():
    product_request = service.create_product_request(
        data=request.get_json(silent=True) or {},
        user_id=get_jwt_identity(),
    )
    return success_response(
        {"productRequest": normalize_product_request(product_request)},
        201,
    )


@v1_bp.route("/product-requests/my-requests", methods=["GET"])
@jwt_required()
def list_my_product_requests():
    product_requests = service.list_user_product_requests(user_id=get_jwt_identity())
    return success_response(
        {"productRequests": [normalize_product_request(r) for r in product_requests]},
        results=len(product_requests),
    )


@v1_bp.route("/product-requests", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_product_requests():
    product_requests = service.list_product_requests(status=request.args.get("status"))
    return success_response(
        {"productRequests": [normalize_product_request(r, admin=True) for r in product_requests]},
        results=len(product_requests),
    )


@v1_bp.route("/product-requests/<request_id>", methods=["GET"])
@jwt_required()
def get_product_request(request_id):
    is_admin = get_jwt().get("role") == "admin"
    product_request = service.get_product_request(
        request_id=request_id,
        user_id=get_jwt_identity(),
        is_admin=is_admin,
    )
    return success_response(
        {"productRequest": normalize_product_request(product_request, admin=is_admin)}
    )


@v1_bp.route("/product-requests/<request_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_product_request(request_id):
    data = request.get_json(silent=True) or {}
    product_request = service.update_product_request(
        request_id=request_id,
        status=data.get("status"),
        admin_notes=data.get("adminNotes"),
    )
    return success_response(
        {"productRequest": normalize_product_request(product_request, admin=True)}
    )
