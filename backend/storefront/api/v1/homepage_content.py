from flask import request
from flask_jwt_extended import jwt_required
from storefront.application import homepage_content as service
from storefront.normalizers.homepage_content import normalize_homepage_content
from storefront.utils.decorators import roles_required
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/homepage-content", methods=["GET"])
def list_homepage_content():
    sections = service.list_sections()
    return success_response([normalize_homepage_content(s) for s in sections])


@v1_bp.route("/homepage-content/<section_name>", methods=["GET"])
def get_homepage_section(section_name):
    return success_response(normalize_homepage_content(service.get_section(section_name=section_name)))


@v1_bp.route("/homepage-content/initialize", methods=["POST"])
@jwt_required()
@roles_required("admin")
def initialize_homepage_content():
    sections = service.initialize_defaults()
    return success_response(
        [normalize_homepage_content(s) for s in sections],
        message="Default homepage content initialized",
    )


@v1_bp.route("/homepage-content/<section_name>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def upsert_homepage_section(section_name):
    section = service.upsert_section(
        section_name=section_name,
        data=request.get_json(silent=True) or {},
    )
    return success_response(normalize_homepage_content(section))


@v1_bp.route("/homepage-content/<section_name>/elements", methods=["POST"])
@jwt_required()
@roles_required("admin")
def add_homepage_element(section_name):
    section = service.add_element(
        section_name=section_name,
        data=request.get_json(silent=True) or {},
    )
    return success_response(normalize_homepage_content(section), 201)


@v1_bp.route("/homepage-content/<section_name>/elements/<element_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_homepage_element(section_name, element_id):
    section = service.update_element(
        section_name=section_name,
        element_id=element_id,
        data=request.get_json(silent=True) or {},
    )
    return success_response(normalize_homepage_content(section))


@v1_bp.route("/homepage-content/<section_name>/elements/<element_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_homepage_element(section_name, element_id):
    section = service.delete_element(section_name=section_name, element_id=element_id)
    return success_response(normalize_homepage_content(section))
