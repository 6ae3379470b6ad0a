from collections import OrderedDict
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta
from flask import current_app
from sqlalchemy import or_

from storefront.errors import ValidationError
from storefront.models.sms_log import SMSLog
from storefront.models.user import User
from storefront.services.sms import MAX_MESSAGE_LENGTH, SMSService
from storefront.utils.pagination import paginate_offset
from storefront.utils.request_data import coerce_bool
from storefront.utils.transaction import transactional

TARGET_GROUPS = {"all", "active_customers", "new_users"}
PERIOD_FORMATS = {
    "day": "%Y-%m-%d",
    "week": "%Y-W%U",
    "month": "%Y-%m",
}


def _unique(values: Iterable[str]) -> List[str]:
    return list(OrderedDict.fromkeys(v for v in values if v))


def _parse_datetime(value: Optional[str], field: str):
    if not value:
        return None
    try:
        return date_parser.parse(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"Invalid {field}")


def _check_message(message: Optional[str]) -> str:
    if message is not None and not isinstance(message, str):
        raise ValidationError("Message must be text")
    if not message or not message.strip():
        raise ValidationError("Message is required")
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError(f"Message exceeds {MAX_MESSAGE_LENGTH} character limit")
    return message


def _summary(result: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "batchId": result["batchId"],
        "messagesSent": result["messagesSent"],
        "recipients": len(result["recipients"]),
        "cost": result["cost"],
        "balance": result["balance"],
    }


# -------------------------------
# Recipients
# -------------------------------

def resolve_recipients(*, phone_numbers=None, user_ids=None) -> List[str]:
    """Phones of the given users followed by explicit numbers, de-duplicated."""
    numbers = []

    if user_ids:
        users = User.query.filter(User.id.in_(list(user_ids))).all()
        numbers.extend(user.phone for user in users if user.phone)

    if phone_numbers:
        if isinstance(phone_numbers, str):
            phone_numbers = [phone_numbers]
        numbers.extend(str(number) for number in phone_numbers)

    return _unique(numbers)


def target_group_numbers(target_group: Optional[str], now=None) -> List[str]:
    now = now or datetime.now(timezone.utc)
    query = User.query.filter(User.phone.isnot(None), User.phone != "")

    if target_group == "active_customers":
        query = query.filter(User.created_at >= now - relativedelta(months=6))
    elif target_group == "new_users":
        query = query.filter(User.created_at >= now - timedelta(days=30))

    return _unique(user.phone for user in query.all())


# -------------------------------
# Sending
# -------------------------------

def send_custom(
    *,
    data: Dict[str, Any],
    admin_id: str,
) -> Dict[str, Any]:
    phone_numbers = data.get("phoneNumbers")
    user_ids = data.get("userIds")

    if not phone_numbers and not user_ids:
        raise ValidationError("Either phone numbers or user IDs must be provided")

    message = _check_message(data.get("message"))

    numbers = resolve_recipients(phone_numbers=phone_numbers, user_ids=user_ids)
    if not numbers:
        raise ValidationError("No valid phone numbers found")

    result = SMSService.from_app().send_custom_sms(
        numbers,
        message,
        promotional=coerce_bool(data.get("promotional") or False, "promotional"),
        schedule_time=_parse_datetime(data.get("scheduleTime"), "scheduleTime"),
        admin_id=admin_id,
    )
    return _summary(result)


def send_promotional(*, data: Dict[str, Any], admin_id: str) -> Dict[str, Any]:
    message = _check_message(data.get("message"))

    target_group = data.get("targetGroup") or "all"
    if target_group not in TARGET_GROUPS:
        raise ValidationError(
            f"Invalid targetGroup '{target_group}'. Allowed: {', '.join(sorted(TARGET_GROUPS))}"
        )

    numbers = target_group_numbers(target_group)
    if not numbers:
        raise ValidationError("No users found with phone numbers")

    result = SMSService.from_app().send_promotional_sms(
        numbers,
        message,
        schedule_time=_parse_datetime(data.get("scheduleTime"), "scheduleTime"),
        admin_id=admin_id,
    )
    return _summary(result)


def send_test(*, data: Dict[str, Any], admin_id: str) -> Dict[str, Any]:
    config = current_app.config
    phone_number = data.get("phoneNumber") or config.get("SMS_TEST_NUMBER")
    message = data.get("message") or f"This is a test SMS from {config.get('BRAND_NAME')}."

    if not phone_number:
        raise ValidationError("Phone number and message are required")

    return SMSService.from_app().send_custom_sms(
        phone_number,
        f"TEST SMS: {message}",
        admin_id=admin_id,
    )


# -------------------------------
# Reporting
# -------------------------------

def list_logs(*, filters: Dict[str, Any], page: int, per_page: int) -> Tuple[List[SMSLog], int]:
    query = SMSLog.query

    if filters.get("type") and filters["type"] != "all":
        query = query.filter(SMSLog.type == filters["type"])
    if filters.get("status") and filters["status"] != "all":
        query = query.filter(SMSLog.status == filters["status"])
    if filters.get("phoneNumber"):
        query = query.filter(SMSLog.phone_number.ilike(f"%{filters['phoneNumber']}%"))

    start = _parse_datetime(filters.get("startDate"), "startDate")
    end = _parse_datetime(filters.get("endDate"), "endDate")
    if start and end:
        query = query.filter(SMSLog.created_at >= start, SMSLog.created_at <= end)

    if filters.get("search"):
        pattern = f"%{filters['search']}%"
        query = query.filter(or_(SMSLog.message.ilike(pattern), SMSLog.phone_number.ilike(pattern)))

    return paginate_offset(
        query.order_by(SMSLog.created_at.desc()),
        page=page,
        per_page=per_page,
    )


def build_stats(*, start_date=None, end_date=None, period: str = "week") -> Dict[str, Any]:
    """
    Overview, time series and per-type breakdown of SMS activity.

    Defaults to the last 30 days when no range is given.
    """
    start = _parse_datetime(start_date, "startDate")
    end = _parse_datetime(end_date, "endDate")

    query = SMSLog.query
    if start and end:
        query = query.filter(SMSLog.created_at >= start, SMSLog.created_at <= end)
    else:
        query = query.filter(SMSLog.created_at >= datetime.now(timezone.utc) - timedelta(days=30))

    rows = query.with_entities(SMSLog.created_at, SMSLog.status, SMSLog.cost, SMSLog.type).all()

    overview = {
        "totalSent": 0,
        "totalCost": 0.0,
        "sentCount": 0,
        "failedCount": 0,
        "deliveredCount": 0,
    }
    buckets: Dict[str, Dict[str, Any]] = {}
    by_type: Dict[str, Dict[str, Any]] = {}
    bucket_format = PERIOD_FORMATS.get(period, PERIOD_FORMATS["day"])

    for created_at, status, cost, sms_type in rows:
        cost = cost or 0

        overview["totalSent"] += 1
        overview["totalCost"] += cost
        if status in ("sent", "failed", "delivered"):
            overview[f"{status}Count"] += 1

        key = created_at.strftime(bucket_format)
        bucket = buckets.setdefault(key, {"period": key, "count": 0, "cost": 0.0, "sent": 0, "failed": 0})
        bucket["count"] += 1
        bucket["cost"] += cost
        if status in ("sent", "failed"):
            bucket[status] += 1

        entry = by_type.setdefault(sms_type, {"type": sms_type, "count": 0, "cost": 0.0})
        entry["count"] += 1
        entry["cost"] += cost

    overview["totalCost"] = round(overview["totalCost"], 2)

    return {
        "overview": overview,
        "timeSeries": [buckets[key] for key in sorted(buckets)],
        "byType": sorted(by_type.values(), key=lambda e: e["count"], reverse=True),
        "currentBalance": SMSService.from_app().get_balance().get("balance"),
    }


def apply_delivery_receipts(*, batch_id: Optional[str], receipts: Any) -> int:
    """Update logs of ``batch_id`` from gateway receipts matched by number."""
    if not batch_id:
        raise ValidationError("Batch ID is required")

    receipts_by_number = {
        str(receipt.get("number")): receipt
        for receipt in receipts or []
        if isinstance(receipt, dict) and receipt.get("number")
    }

    updated = 0
    with transactional():
        for log in SMSLog.query.filter_by(batch_id=batch_id).all():
            receipt = receipts_by_number.get(log.phone_number)
            if receipt and receipt.get("status"):
                log.update_delivery_status(receipt["status"], receipt.get("reason"))
                updated += 1

    return updated
