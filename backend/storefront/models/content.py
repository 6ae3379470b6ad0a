from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel, utc_now

CONTENT_TYPES = {
    "product-condition-guidelines",
    "terms-and-conditions",
    "order-policy",
    "privacy-policy",
    "shipping-and-delivery",
    "buyer-faq",
    "seller-faq",
}


class Content(BaseModel):
    """Long-form policy and FAQ pages, one row per type."""

    __tablename__ = "contents"

    type = db.Column(db.String(64), nullable=False, unique=True, index=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    last_updated = db.Column(db.DateTime(timezone=True), default=utc_now)

    updated_by_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    updated_by = db.relationship("User")

    @validates("type")
    def validate_type(self, key, value):
        return assert_choice("content type", value, CONTENT_TYPES)
