from storefront.extensions import db
from .base import BaseModel, SingletonMixin


class Navbar(BaseModel, SingletonMixin):
    __tablename__ = "navbars"

    logo = db.Column(db.String(512), nullable=False)

    # [{id, name, url, order, isActive, isMegaMenu, isHighlighted}]
    menu_items = db.Column(db.JSON, nullable=False, default=list)
    # [{id, menuItemId, categories: [{id, name, slug, order, isActive, image}], image, isServiceMenu}]
    mega_menus = db.Column(db.JSON, nullable=False, default=list)

    search_enabled = db.Column(db.Boolean, default=True)
    wishlist_enabled = db.Column(db.Boolean, default=True)
    cart_enabled = db.Column(db.Boolean, default=True)
    user_enabled = db.Column(db.Boolean, default=True)
