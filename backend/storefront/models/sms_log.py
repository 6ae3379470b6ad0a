from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel, utc_now

SMS_STATUSES = {"sent", "failed", "delivered", "pending"}
SMS_TYPES = {"order_confirmation", "order_status", "promotional", "custom", "general"}


class SMSLog(BaseModel):
    __tablename__ = "sms_logs"

    __table_args__ = (
        db.Index("ix_sms_phone_created", "phone_number", "created_at"),
        db.Index("ix_sms_type_created", "type", "created_at"),
        db.Index("ix_sms_status_created", "status", "created_at"),
    )

    phone_number = db.Column(db.String(20), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="pending")
    provider = db.Column(db.String(50), default="smsgatewayhub")
    type = db.Column(db.String(30), nullable=False, default="general")
    batch_id = db.Column(db.String(64), nullable=True, index=True)
    cost = db.Column(db.Float, default=0)

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    user = db.relationship("User", foreign_keys=[user_id])
    admin_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    admin = db.relationship("User", foreign_keys=[admin_id])

    error = db.Column(db.Text, nullable=True)
    response = db.Column(db.JSON, nullable=True)

    # {status, timestamp, reason}
    delivery_status = db.Column(db.JSON, nullable=True)
    scheduled = db.Column(db.Boolean, default=False)
    scheduled_time = db.Column(db.DateTime(timezone=True), nullable=True)
    sent_at = db.Column(db.DateTime(timezone=True), nullable=True)
    delivered_at = db.Column(db.DateTime(timezone=True), nullable=True)

    @validates("status")
    def validate_status(self, key, value):
        return assert_choice("status", value, SMS_STATUSES)

    @validates("type")
    def validate_type(self, key, value):
        return assert_choice("type", value, SMS_TYPES)

    @property
    def formatted_phone(self):
        number = self.phone_number or ""
        if len(number) == 12 and number.startswith("91"):
            return f"+91 {number[2:7]} {number[7:]}"
        return number

    def update_delivery_status(self, status, reason=None):
        now = utc_now()
        self.delivery_status = {
            "status": status,
            "timestamp": now.isoformat(),
            "reason": reason,
        }

        if status == "delivered":
            self.status = "delivered"
            self.delivered_at = now
        elif status == "failed":
            self.status = "failed"
