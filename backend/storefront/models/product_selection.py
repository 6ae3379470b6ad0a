from sqlalchemy.orm import declared_attr
from storefront.extensions import db
from .base import BaseModel, SingletonMixin


class ProductSelectionMixin(SingletonMixin):
    """Ordered, admin-curated list of product references."""

    # [{productId, isSelected, order}]
    selected_products = db.Column(db.JSON, nullable=False, default=list)
    is_active = db.Column(db.Boolean, default=True)

    @declared_attr
    def updated_by_id(cls):
        return db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False)

    @declared_attr
    def updated_by(cls):
        return db.relationship("User")

    def ordered_product_ids(self):
        entries = sorted(self.selected_products or [], key=lambda e: e.get("order", 0))
        return [e["productId"] for e in entries if e.get("isSelected", True)]


class PopupProductSelection(BaseModel, ProductSelectionMixin):
    __tablename__ = "popup_product_selections"


class SaleItemsSelection(BaseModel, ProductSelectionMixin):
    __tablename__ = "sale_items_selections"
