from storefront.extensions import db
from .base import BaseModel


class Menu(BaseModel):
    __tablename__ = "menus"

    code = db.Column(db.Integer, nullable=True)
    name = db.Column(db.String(120), nullable=False)
    slug = db.Column(db.String(160), nullable=False)
    status = db.Column(db.Boolean, nullable=False, default=True)

    post_by_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False)
    post_by = db.relationship("User")
