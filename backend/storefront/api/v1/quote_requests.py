from flask import current_app, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from storefront.application import quote_requests as service
from storefront.extensions import limiter
from storefront.normalizers.pagination import normalize_pagination
from storefront.normalizers.quote_request import normalize_quote_request
from storefront.utils.decorators import roles_required
from storefront.utils.pagination import get_page_args
from storefront.utils.responses import success_response
from . import v1_bp


def _quote_rate_limit():
    return current_app.config["QUOTE_REQUEST_RATE_LIMIT"]


@v1_bp.route("/quote-requests", methods=["POST"])
@limiter.limit(_quote_rate_limit)
@jwt_required(optional=True)
def create_quote_request():
    quote = service.create_quote_request(
        data=request.get_json(silent=True) or {},
        user_id=get_jwt_identity(),
    )
    return success_response(
        normalize_quote_request(quote),
        201,
        message="Quote request submitted successfully",
    )


@v1_bp.route("/quote-requests", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_quote_requests():
    page_args = get_page_args(default_per_page=10)
    items, total = service.list_quote_requests(filters=request.args, **page_args)
    return success_response(
        normalize_pagination(items, normalize_quote_request, total=total, **page_args)
    )


@v1_bp.route("/quote-requests/<quote_id>/status", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_quote_request_status(quote_id):
    data = request.get_json(silent=True) or {}
    quote = service.update_quote_status(quote_id=quote_id, status=data.get("status"))
    return success_response(
        normalize_quote_request(quote),
        message="Quote request status updated",
    )
