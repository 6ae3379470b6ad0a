from .exceptions import InvariantViolation


def assert_choice(field, value, choices):
    if value not in choices:
        allowed = ", ".join(sorted(choices))
        raise InvariantViolation(f"Invalid {field} '{value}'. Allowed: {allowed}")
    return value


def assert_boolean(field, value):
    if not isinstance(value, bool):
        raise InvariantViolation(f"{field} must be a boolean")
    return value
