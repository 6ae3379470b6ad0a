from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.exceptions import InvariantViolation
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel

QUOTE_STATUSES = {"pending", "responded", "closed"}


class QuoteRequest(BaseModel):
    __tablename__ = "quote_requests"

    product_id = db.Column(db.String(36), db.ForeignKey("products.id"), nullable=False, index=True)
    product = db.relationship("Product")

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    user = db.relationship("User")
    is_guest = db.Column(db.Boolean, default=True)

    full_name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    whatsapp = db.Column(db.String(30), default="")
    price = db.Column(db.String(50), nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    message = db.Column(db.Text, default="")
    product_url = db.Column(db.String(1024), default="")

    status = db.Column(db.String(20), nullable=False, default="pending", index=True)
    reference_number = db.Column(db.String(32), unique=True, nullable=False, index=True)

    @validates("status")
    def validate_status(self, key, value):
        return assert_choice("status", value, QUOTE_STATUSES)

    @validates("quantity")
    def validate_quantity(self, key, value):
        try:
            quantity = int(value)
        except (TypeError, ValueError):
            raise InvariantViolation("quantity must be a number")
        if quantity < 1:
            raise InvariantViolation("quantity must be at least 1")
        return quantity
