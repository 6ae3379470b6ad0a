from sqlalchemy import or_, and_
from storefront.extensions import db
from .base import BaseModel


class Product(BaseModel):
    """Catalog entry referenced by quote requests and curated selections."""

    __tablename__ = "products"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=True, index=True)
    description = db.Column(db.Text, default="")
    image = db.Column(db.String(512), nullable=True)
    images = db.Column(db.JSON, default=list)

    price = db.Column(db.Float, nullable=False, default=0)
    sale_price = db.Column(db.Float, nullable=True)
    retail_price = db.Column(db.Float, nullable=True)

    brand = db.Column(db.String(120), nullable=True)
    category = db.Column(db.String(120), nullable=True)

    stock_quantity = db.Column(db.Integer, default=1)
    sold_out = db.Column(db.Boolean, default=False)
    is_sale = db.Column(db.Boolean, default=False)
    status = db.Column(db.Boolean, default=True)

    @classmethod
    def sold_out_clause(cls):
        return or_(cls.sold_out.is_(True), cls.stock_quantity <= 0)

    @classmethod
    def on_sale_clause(cls):
        return and_(
            or_(cls.is_sale.is_(True), and_(cls.sale_price.isnot(None), cls.sale_price > 0)),
            cls.status.is_(True),
        )

    @property
    def is_sold_out(self):
        return bool(self.sold_out) or (self.stock_quantity or 0) <= 0

    @property
    def is_on_sale(self):
        return bool(self.status) and (bool(self.is_sale) or (self.sale_price or 0) > 0)
