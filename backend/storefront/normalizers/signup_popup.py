from .common import timestamps

# model attribute -> wire key
SIGNUP_POPUP_FIELDS = {
    "title": "title",
    "discount_amount": "discountAmount",
    "minimum_order_amount": "minimumOrderAmount",
    "coupon_code": "couponCode",
    "offer_description": "offerDescription",
    "coupon_helper_text": "couponHelperText",
    "button_text": "buttonText",
    "loading_text": "loadingText",
    "success_title": "successTitle",
    "success_message": "successMessage",
    "success_discount_text": "successDiscountText",
    "success_redirect_text": "successRedirectText",
    "terms_text": "termsText",
    "limited_offer_text": "limitedOfferText",
    "enabled": "enabled",
    "show_delay_ms": "showDelayMs",
    "background_image": "backgroundImage",
}


def normalize_signup_popup(popup):
    data = {"id": popup.id}
    for attr, key in SIGNUP_POPUP_FIELDS.items():
        data[key] = getattr(popup, attr)
    data.update(timestamps(popup))
    return data
