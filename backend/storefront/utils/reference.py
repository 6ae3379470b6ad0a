import random
from datetime import datetime, timezone

MAX_ATTEMPTS = 10


def format_reference_number(now=None, suffix=None):
    """``QR<YYYYMMDD>-<4 digits>``"""
    now = now or datetime.now(timezone.utc)
    if suffix is None:
        suffix = random.randint(0, 9999)
    return f"QR{now:%Y%m%d}-{suffix:04d}"


def generate_reference_number(exists, now=None):
    """
    Generate a reference number not rejected by ``exists``.

    ``exists`` is a callable returning True when a candidate is taken.
    """
    for _ in range(MAX_ATTEMPTS):
        candidate = format_reference_number(now)
        if not exists(candidate):
            return candidate
    raise RuntimeError("Could not allocate a unique reference number")
