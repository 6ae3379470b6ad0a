from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel

PRODUCT_REQUEST_STATUSES = {"pending", "approved", "rejected", "fulfilled"}


class ProductRequest(BaseModel):
    __tablename__ = "product_requests"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    budget = db.Column(db.Float, nullable=False)
    contact_email = db.Column(db.String(200), nullable=False)
    contact_phone = db.Column(db.String(30), nullable=True)
    reference_image = db.Column(db.String(512), nullable=True)
    is_guest = db.Column(db.Boolean, default=True)

    status = db.Column(db.String(20), nullable=False, default="pending", index=True)
    admin_notes = db.Column(db.Text, default="")

    requested_by_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True, index=True)
    requested_by = db.relationship("User")

    @validates("status")
    def validate_status(self, key, value):
        return assert_choice("status", value, PRODUCT_REQUEST_STATUSES)
