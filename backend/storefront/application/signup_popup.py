from typing import Any, Dict, Tuple

from storefront.domain.invariants.fields import assert_boolean
from storefront.errors import ValidationError
from storefront.extensions import db
from storefront.models.signup_popup import SignupPopup
from storefront.normalizers.signup_popup import SIGNUP_POPUP_FIELDS
from storefront.utils.media import delete_file, save_file
from storefront.utils.request_data import coerce_bool, coerce_int
from storefront.utils.transaction import transactional

INTEGER_FIELDS = {"discountAmount", "minimumOrderAmount", "showDelayMs"}
BOOLEAN_FIELDS = {"enabled"}


def _coerce(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map wire keys to model attributes, coercing multipart strings."""
    values = {}
    for attr, key in SIGNUP_POPUP_FIELDS.items():
        if key not in data:
            continue
        value = data[key]
        if value is None and key != "backgroundImage":
            raise ValidationError(f"{key} cannot be empty")
        if key in INTEGER_FIELDS:
            value = coerce_int(value, key)
        elif key in BOOLEAN_FIELDS:
            value = coerce_bool(value, key)
        values[attr] = value
    return values


def get_or_create_popup() -> SignupPopup:
    popup = SignupPopup.current()
    if popup is None:
        popup = SignupPopup()
        with transactional():
            db.session.add(popup)
    return popup


def update_popup(*, data: Dict[str, Any], background_file=None) -> Tuple[SignupPopup, bool]:
    values = _coerce(data)
    if background_file is not None:
        values["background_image"] = save_file(background_file, subfolder="signup-popup")

    popup = SignupPopup.current()
    created = popup is None

    with transactional():
        if created:
            popup = SignupPopup()
            db.session.add(popup)
        elif background_file is not None:
            delete_file(popup.background_image)
        for attr, value in values.items():
            setattr(popup, attr, value)

    return popup, created


def toggle_popup(*, enabled: Any) -> SignupPopup:
    assert_boolean("enabled", enabled)

    popup = SignupPopup.current()
    with transactional():
        if popup is None:
            popup = SignupPopup()
            db.session.add(popup)
        popup.enabled = enabled

    return popup


def seed_popup() -> SignupPopup:
    if SignupPopup.query.count() > 0:
        raise ValidationError("Signup popup already exists")

    popup = SignupPopup()
    with transactional():
        db.session.add(popup)
    return popup
