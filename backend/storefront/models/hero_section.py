from sqlalchemy.orm import validates
from storefront.extensions import db
from storefront.domain.invariants.fields import assert_choice
from .base import BaseModel

HERO_STATUSES = {"active", "inactive"}


class HeroSection(BaseModel):
    __tablename__ = "hero_sections"

    title = db.Column(db.String(255), nullable=False)
    subtitle = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    image = db.Column(db.String(512), nullable=False)
    position = db.Column(db.Integer, nullable=True)
    button_text = db.Column(db.String(120), nullable=False)
    button_link = db.Column(db.String(512), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="active")

    @validates("status")
    def validate_status(self, key, value):
        return assert_choice("status", value, HERO_STATUSES)
