import logging

from flask import current_app, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from storefront.application import sms as service
from storefront.normalizers.pagination import normalize_pagination
from storefront.normalizers.sms_log import normalize_sms_log
from storefront.services.sms import SMSService, sms_templates
from storefront.utils.decorators import roles_required
from storefront.utils.pagination import get_page_args
from storefront.utils.responses import success_response
from . import v1_bp

logger = logging.getLogger(__name__)


@v1_bp.route("/sms/delivery-status", methods=["POST"])
def sms_delivery_status():
    data = request.get_json(silent=True) or {}
    updated = service.apply_delivery_receipts(
        batch_id=data.get("batch_id"),
        receipts=data.get("receipts"),
    )
    logger.info("Delivery receipts for batch %s updated %d logs", data.get("batch_id"), updated)
    return success_response(message="Delivery status updated")


@v1_bp.route("/sms/send", methods=["POST"])
@jwt_required()
@roles_required("admin")
def send_custom_sms():
    result = service.send_custom(
        data=request.get_json(silent=True) or {},
        admin_id=get_jwt_identity(),
    )
    return success_response(result, message="SMS sent successfully")


@v1_bp.route("/sms/promotional", methods=["POST"])
@jwt_required()
@roles_required("admin")
def send_promotional_sms():
    result = service.send_promotional(
        data=request.get_json(silent=True) or {},
        admin_id=get_jwt_identity(),
    )
    return success_response(result, message="Promotional SMS sent successfully")


@v1_bp.route("/sms/test", methods=["POST"])
@jwt_required()
@roles_required("admin")
def send_test_sms():
    result = service.send_test(
        data=request.get_json(silent=True) or {},
        admin_id=get_jwt_identity(),
    )
    return success_response(result, message="Test SMS sent successfully")


@v1_bp.route("/sms/logs", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_sms_logs():
    page_args = get_page_args()
    items, total = service.list_logs(filters=request.args, **page_args)
    return success_response(
        normalize_pagination(items, normalize_sms_log, total=total, **page_args)
    )


@v1_bp.route("/sms/stats", methods=["GET"])
@jwt_required()
@roles_required("admin")
def sms_stats():
    stats = service.build_stats(
        start_date=request.args.get("startDate"),
        end_date=request.args.get("endDate"),
        period=request.args.get("period", "week"),
    )
    return success_response(stats)


@v1_bp.route("/sms/templates", methods=["GET"])
@jwt_required()
@roles_required("admin")
def sms_templates_list():
    templates = sms_templates(current_app.config.get("SMS_SENDER_ID"))
    return success_response({"templates": templates})


@v1_bp.route("/sms/health", methods=["GET"])
@jwt_required()
@roles_required("admin")
def sms_health():
    return success_response(SMSService.from_app().check_health())
