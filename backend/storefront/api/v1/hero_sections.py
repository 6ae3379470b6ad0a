from flask import request
from flask_jwt_extended import jwt_required
from storefront.application import hero_sections as service
from storefront.normalizers.hero_section import normalize_hero_section
from storefront.utils.decorators import roles_required
from storefront.utils.request_data import coerce_int
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/hero-sections", methods=["GET"])
def list_hero_sections():
    limit = coerce_int(request.args.get("limit", service.DEFAULT_LIMIT), "limit")
    heroes = service.list_hero_sections(limit=max(limit, 1))
    return success_response(
        [normalize_hero_section(h) for h in heroes],
        results=len(heroes),
    )


@v1_bp.route("/hero-sections/<hero_id>", methods=["GET"])
def get_hero_section(hero_id):
    return success_response(normalize_hero_section(service.get_hero_section(hero_id=hero_id)))


@v1_bp.route("/hero-sections", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_hero_section():
    hero = service.create_hero_section(data=request.get_json(silent=True) or {})
    return success_response(normalize_hero_section(hero), 201)


@v1_bp.route("/hero-sections/<hero_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_hero_section(hero_id):
    hero = service.update_hero_section(hero_id=hero_id, data=request.get_json(silent=True) or {})
    return success_response(normalize_hero_section(hero))


@v1_bp.route("/hero-sections/<hero_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_hero_section(hero_id):
    service.delete_hero_section(hero_id=hero_id)
    return "", 204
