from flask import request
from flask_jwt_extended import jwt_required
from storefront.application import contact_submissions as service
from storefront.normalizers.contact_submission import normalize_contact_submission
from storefront.utils.decorators import roles_required
from storefront.utils.responses import success_response
from . import v1_bp


@v1_bp.route("/contact-submissions", methods=["POST"])
def create_contact_submission():
    submission = service.create_submission(data=request.get_json(silent=True) or {})
    return success_response(normalize_contact_submission(submission), 201)


@v1_bp.route("/contact-submissions", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_contact_submissions():
    submissions = service.list_submissions()
    return success_response(
        [normalize_contact_submission(s) for s in submissions],
        results=len(submissions),
    )


@v1_bp.route("/contact-submissions/<submission_id>/status", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_contact_submission_status(submission_id):
    data = request.get_json(silent=True) or {}
    submission = service.update_submission_status(
        submission_id=submission_id,
        status=data.get("status"),
    )
    return success_response(normalize_contact_submission(submission))
