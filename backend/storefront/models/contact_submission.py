from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel

SUBMISSION_STATUSES = {"new", "read", "responded"}


class ContactSubmission(BaseModel):
    __tablename__ = "contact_submissions"

    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="new", index=True)

    @validates("status")
    def validate_status(self, key, value):
        return assert_choice("status", value, SUBMISSION_STATUSES)
