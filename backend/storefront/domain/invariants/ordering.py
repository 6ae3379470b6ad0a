from .exceptions import InvariantViolation


def assert_unique_ids(items, label="Items"):
    ids = [item.get("id") for item in items]
    if len(ids) != len(set(ids)):
        raise InvariantViolation(f"{label} contain duplicate ids.")
