from .common import iso, timestamps
from .user import normalize_user_ref


def normalize_sms_log(log):
    return {
        "id": log.id,
        "phoneNumber": log.phone_number,
        "formattedPhone": log.formatted_phone,
        "message": log.message,
        "status": log.status,
        "provider": log.provider,
        "type": log.type,
        "batchId": log.batch_id,
        "cost": log.cost,
        "user": normalize_user_ref(log.user),
        "admin": normalize_user_ref(log.admin),
        "error": log.error,
        "deliveryStatus": log.delivery_status,
        "scheduled": log.scheduled,
        "scheduledTime": iso(log.scheduled_time),
        "sentAt": iso(log.sent_at),
        "deliveredAt": iso(log.delivered_at),
        **timestamps(log),
    }
