from storefront.extensions import db
from .base import BaseModel, SingletonMixin

SIGNUP_POPUP_DEFAULTS = {
    "title": "Exclusive Offer!",
    "discount_amount": 2000,
    "minimum_order_amount": 15000,
    "coupon_code": "WELCOME20",
    "offer_description": "Get ₹2000 off on your first order above ₹15000",
    "coupon_helper_text": "Applied automatically at checkout",
    "button_text": "Claim My 2000 OFF",
    "loading_text": "Creating Account...",
    "success_title": "🎉 Welcome!",
    "success_message": "Your ₹2000 discount is ready to use!",
    "success_discount_text": "Discount code WELCOME20 activated",
    "success_redirect_text": "Redirecting to your dashboard...",
    "terms_text": "By signing up, you agree to our terms and conditions.",
    "limited_offer_text": "Limited time offer • New customers only",
    "enabled": True,
    "show_delay_ms": 2000,
    "background_image": "",
}


def _default(name):
    return SIGNUP_POPUP_DEFAULTS[name]


class SignupPopup(BaseModel, SingletonMixin):
    __tablename__ = "signup_popups"

    title = db.Column(db.String(255), nullable=False, default=_default("title"))
    discount_amount = db.Column(db.Integer, nullable=False, default=_default("discount_amount"))
    minimum_order_amount = db.Column(db.Integer, nullable=False, default=_default("minimum_order_amount"))
    coupon_code = db.Column(db.String(64), nullable=False, default=_default("coupon_code"))
    offer_description = db.Column(db.String(512), nullable=False, default=_default("offer_description"))
    coupon_helper_text = db.Column(db.String(255), nullable=False, default=_default("coupon_helper_text"))
    button_text = db.Column(db.String(120), nullable=False, default=_default("button_text"))
    loading_text = db.Column(db.String(120), nullable=False, default=_default("loading_text"))
    success_title = db.Column(db.String(255), nullable=False, default=_default("success_title"))
    success_message = db.Column(db.String(512), nullable=False, default=_default("success_message"))
    success_discount_text = db.Column(db.String(255), nullable=False, default=_default("success_discount_text"))
    success_redirect_text = db.Column(db.String(255), nullable=False, default=_default("success_redirect_text"))
    terms_text = db.Column(db.String(512), nullable=False, default=_default("terms_text"))
    limited_offer_text = db.Column(db.String(255), nullable=False, default=_default("limited_offer_text"))
    enabled = db.Column(db.Boolean, default=_default("enabled"))
    show_delay_ms = db.Column(db.Integer, default=_default("show_delay_ms"))
    background_image = db.Column(db.String(512), default=_default("background_image"))
