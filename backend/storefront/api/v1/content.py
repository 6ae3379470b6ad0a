from flask import request
from flask_jwt_extended import get_jwt_identity, jwt_required
from storefront.application import content as service
from storefront.normalizers.content import normalize_content
from storefront.utils.decorators import roles_required
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/content/<content_type>", methods=["GET"])
def get_content(content_type):
    content = service.get_content(content_type=content_type)
    return success_response(normalize_content(content))


@v1_bp.route("/content", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_content():
    contents = service.list_content()
    return success_response(
        [normalize_content(c, admin=True) for c in contents],
        results=len(contents),
    )


@v1_bp.route("/content/<content_type>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def upsert_content(content_type):
    data = request.get_json(silent=True) or {}
    content = service.upsert_content(
        content_type=content_type,
        title=data.get("title"),
        body=data.get("content"),
        actor_id=get_jwt_identity(),
    )
    return success_response(normalize_content(content, admin=True))


@v1_bp.route("/content/seed", methods=["POST"])
@jwt_required()
@roles_required("admin")
def seed_content():
    created = service.seed_default_content(actor_id=get_jwt_identity())
    return success_response(
        [normalize_content(c, admin=True) for c in created],
        201,
        message=f"Seeded {len(created)} content pages",
        results=len(created),
    )
