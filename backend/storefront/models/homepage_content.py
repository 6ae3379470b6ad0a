from storefront.extensions import db
from .base import BaseModel

ELEMENT_TYPES = {"text", "image", "button", "link"}
ELEMENT_METADATA_KEYS = ("alt", "href", "target", "className", "style")


class HomepageContent(BaseModel):
    __tablename__ = "homepage_contents"

    section_name = db.Column(db.String(100), nullable=False, unique=True, index=True)
    section_display_name = db.Column(db.String(200), nullable=False)
    # [{id, type, key, value, metadata}]
    elements = db.Column(db.JSON, nullable=False, default=list)
    is_active = db.Column(db.Boolean, default=True)
