import json
from flask import request
from storefront.errors import ValidationError

TRUE_STRINGS = {"true", "1", "yes", "on"}
FALSE_STRINGS = {"false", "0", "no", "off"}


def get_payload():
    """JSON body, or the form fields of a multipart request."""
    if request.is_json:
        return request.get_json(silent=True) or {}
    if request.form:
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def coerce_bool(value, field=None):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise ValidationError(f"{field or 'value'} must be a boolean")


def coerce_int(value, field=None):
    if isinstance(value, bool):
        raise ValidationError(f"{field or 'value'} must be a number")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field or 'value'} must be a number")


def parse_json_field(value, field=None):
    """Multipart forms carry nested structures as JSON strings."""
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            raise ValidationError(f"Invalid JSON in {field or 'field'}")
    return value


def item_id(item):
    """Ids arrive as ``id`` or ``_id``, bare or wrapped in an object."""
    if isinstance(item, dict):
        return item.get("id") or item.get("_id")
    return item
