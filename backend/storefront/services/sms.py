import logging
import re
from datetime import datetime, timedelta, timezone

import requests
from flask import current_app

from storefront.errors import RateLimitError, ServiceUnavailable, ValidationError
from storefront.extensions import db
from storefront.models.sms_log import SMSLog

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 918
MOBILE_PATTERN = re.compile(r"^[6-9]\d{9}$")
ROUTE_TRANSACTIONAL = "1"
ROUTE_PROMOTIONAL = "2"


def validate_phone_number(phone_number):
    """
    Normalize an Indian mobile number to ``91XXXXXXXXXX``.

    Returns None when the input is not a valid mobile number.
    """
    if phone_number is None:
        return None

    cleaned = re.sub(r"\D", "", str(phone_number))

    if len(cleaned) == 10 and MOBILE_PATTERN.match(cleaned):
        return f"91{cleaned}"

    if len(cleaned) == 12 and cleaned.startswith("91") and MOBILE_PATTERN.match(cleaned[2:]):
        return cleaned

    return None


def parse_balance(raw):
    """``"Trans:120.5|Promo:30"`` -> ``{"Trans": 120.5, "Promo": 30.0}``"""
    balances = {}
    for part in str(raw or "").split("|"):
        key, sep, value = part.partition(":")
        if not sep:
            continue
        try:
            balances[key.strip()] = float(value)
        except ValueError:
            continue
    return balances


class SMSService:
    """SMS Gateway Hub client with per-recipient rate limiting and logging."""

    provider = "smsgatewayhub"

    def __init__(self, config):
        self.api_key = config.get("SMS_API_KEY")
        self.sender_id = config.get("SMS_SENDER_ID")
        self.send_url = config.get("SMS_SEND_URL")
        self.balance_url = config.get("SMS_BALANCE_URL")
        self.timeout = config.get("SMS_TIMEOUT", 30)
        self.daily_limit = config.get("SMS_DAILY_LIMIT", 1000)
        self.per_user_daily_limit = config.get("SMS_PER_USER_DAILY_LIMIT", 10)
        self.min_interval = timedelta(seconds=config.get("SMS_MIN_INTERVAL_SECONDS", 60))
        self.cost_per_message = config.get("SMS_COST_PER_MESSAGE", 0.1)
        self.brand = config.get("BRAND_NAME", "")

    @classmethod
    def from_app(cls):
        return cls(current_app.config)

    # -------------------------------
    # Guards
    # -------------------------------

    def check_rate_limits(self, phone_number, now=None):
        now = now or datetime.now(timezone.utc)
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)

        today_total = SMSLog.query.filter(SMSLog.created_at >= start_of_day).count()
        if today_total >= self.daily_limit:
            raise RateLimitError("Daily SMS limit reached")

        number_today = SMSLog.query.filter(
            SMSLog.phone_number == phone_number,
            SMSLog.created_at >= start_of_day,
        ).count()
        if number_today >= self.per_user_daily_limit:
            raise RateLimitError("Daily SMS limit reached for this user")

        recent = SMSLog.query.filter(
            SMSLog.phone_number == phone_number,
            SMSLog.created_at >= now - self.min_interval,
        ).first()
        if recent:
            raise RateLimitError("Please wait before sending another SMS")

        return True

    # -------------------------------
    # Logging
    # -------------------------------

    def log_sms(self, **fields):
        """Persist one send attempt. Never raises."""
        try:
            log = SMSLog(provider=self.provider, **fields)
            db.session.add(log)
            db.session.commit()
            return log
        except Exception:
            db.session.rollback()
            logger.exception("Error logging SMS to %s", fields.get("phone_number"))
            return None

    # -------------------------------
    # Sending
    # -------------------------------

    def _dispatch_one(self, number, message, route, schedule_time=None):
        params = {
            "APIKey": self.api_key,
            "senderid": self.sender_id,
            "channel": "2",
            "DCS": "0",
            "flashsms": "0",
            "number": number,
            "text": message,
            "route": route,
        }
        if schedule_time:
            params["scheduledatetime"] = schedule_time.strftime("%Y-%m-%d %H:%M:%S")

        response = requests.get(self.send_url, params=params, timeout=self.timeout)
        response_text = response.text

        if not response.ok:
            return "failed", None, response_text

        message_id = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            if body.get("ErrorCode") not in (None, "000", 0):
                return "failed", None, response_text
            message_id = body.get("JobId")

        if not message_id:
            match = re.search(r"(\d{10,})", response_text)
            message_id = match.group(1) if match else f"sgh-{int(datetime.now().timestamp() * 1000)}"

        return "sent", str(message_id), response_text

    def send_sms(
        self,
        phone_numbers,
        message,
        *,
        sms_type="general",
        route=ROUTE_TRANSACTIONAL,
        schedule_time=None,
        user_id=None,
        admin_id=None,
    ):
        if not self.api_key:
            raise ServiceUnavailable("SMS Gateway Hub API key not configured")

        if isinstance(phone_numbers, str):
            phone_numbers = [phone_numbers]

        valid_numbers = []
        for number in phone_numbers:
            normalized = validate_phone_number(number)
            if normalized and normalized not in valid_numbers:
                self.check_rate_limits(normalized)
                valid_numbers.append(normalized)

        if not valid_numbers:
            raise ValidationError("No valid phone numbers provided")

        if len(message) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message exceeds {MAX_MESSAGE_LENGTH} character limit")

        details = []
        recipients = []
        total_cost = 0.0

        for number in valid_numbers:
            try:
                status, message_id, response_text = self._dispatch_one(
                    number, message, route, schedule_time
                )
            except requests.RequestException as exc:
                logger.error("SMS sending failed for %s: %s", number, exc)
                details.append({"number": number, "status": "failed", "error": str(exc)})
                self.log_sms(
                    phone_number=number,
                    message=message,
                    status="failed",
                    type=sms_type,
                    error=str(exc),
                    user_id=user_id,
                    admin_id=admin_id,
                )
                continue

            cost = self.cost_per_message if status == "sent" else 0
            if status == "sent":
                recipients.append(number)
                total_cost += cost

            details.append({
                "number": number,
                "status": status,
                "messageId": message_id,
                "response": response_text,
            })
            self.log_sms(
                phone_number=number,
                message=message,
                status=status,
                type=sms_type,
                batch_id=message_id,
                cost=cost,
                user_id=user_id,
                admin_id=admin_id,
                response={"body": response_text},
                scheduled=schedule_time is not None,
                scheduled_time=schedule_time,
                sent_at=datetime.now(timezone.utc) if status == "sent" else None,
            )

        logger.info(
            "SMS batch (%s): %d of %d delivered to gateway",
            sms_type, len(recipients), len(valid_numbers),
        )

        return {
            "success": True,
            "batchId": f"sgh-batch-{int(datetime.now().timestamp() * 1000)}",
            "cost": round(total_cost, 2),
            "balance": None,
            "messagesSent": len(recipients),
            "recipients": recipients,
            "details": details,
        }

    def send_promotional_sms(self, phone_numbers, message, **options):
        promotional_message = f"{message}\n\nReply STOP to unsubscribe - {self.brand}"
        options.setdefault("sms_type", "promotional")
        options.setdefault("route", ROUTE_PROMOTIONAL)
        return self.send_sms(phone_numbers, promotional_message, **options)

    def send_custom_sms(self, phone_numbers, message, promotional=False, **options):
        options.setdefault("sms_type", "custom")
        options.setdefault("route", ROUTE_PROMOTIONAL if promotional else ROUTE_TRANSACTIONAL)
        return self.send_sms(phone_numbers, message, **options)

    # -------------------------------
    # Account
    # -------------------------------

    def get_balance(self):
        """Current transactional balance. Never raises."""
        unavailable = {
            "balance": "Not available",
            "message": "SMS Gateway Hub doesn't provide balance information via API",
        }

        try:
            response = requests.get(
                self.balance_url,
                params={"APIKey": self.api_key},
                timeout=self.timeout,
            )
            if response.status_code != 200:
                return unavailable

            balances = parse_balance(response.json().get("Balance"))
            return {
                "balance": balances.get("Trans"),
                "message": "It has multiple balance status",
            }
        except (requests.RequestException, ValueError, AttributeError) as exc:
            logger.warning("SMS balance lookup failed: %s", exc)
            return unavailable

    def check_health(self):
        if not self.api_key:
            return {
                "healthy": False,
                "error": "SMS Gateway Hub API key not configured",
                "service": self.provider,
            }

        return {
            "healthy": True,
            "message": "SMS Gateway Hub service configured",
            "service": self.provider,
            "apiKey": "Configured",
        }


def sms_templates(sender_id):
    return [
        {
            "id": "sgh_001",
            "body": "Dear {#var#}, Thanks for shopping with Tangerine Luxury. We have receipt your order request. Your order number is {#var#}.",
            "title": "Order Receipt - SMS Gateway Hub Approved",
            "senderName": sender_id or "WEBSMS",
            "provider": SMSService.provider,
            "variables": ["customer_name", "order_number"],
            "isApproved": True,
            "usage": "Order confirmation messages",
        },
        {
            "id": "sgh_002",
            "body": "Your order #{#var#} status updated to: {#var#}. Check details at {#var#} - Tangerine Luxury",
            "title": "Order Status Update - SMS Gateway Hub Approved",
            "senderName": sender_id or "WEBSMS",
            "provider": SMSService.provider,
            "variables": ["order_number", "status", "website_url"],
            "isApproved": True,
            "usage": "Order status update messages",
        },
    ]
