# storefront/utils/pagination.py
from __future__ import annotations

from typing import Any, Tuple, TypedDict

from flask import request
from sqlalchemy.orm import Query

from storefront.errors import ValidationError

DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100


class PageArgs(TypedDict):
    page: int
    per_page: int


def get_page_args(default_per_page: int = DEFAULT_PER_PAGE) -> PageArgs:
    """
    Read ``page`` and ``limit`` (or ``per_page``) from the query string.

    Raises:
    - ValidationError if either value is not a positive integer
    """
    try:
        page = int(request.args.get("page", 1))
        per_page = int(
            request.args.get("limit", request.args.get("per_page", default_per_page))
        )
    except (TypeError, ValueError) as exc:
        raise ValidationError("page and limit must be integers") from exc

    if page < 1 or per_page < 1:
        raise ValidationError("page and limit must be greater than zero")

    return {"page": page, "per_page": min(per_page, MAX_PER_PAGE)}


def paginate_offset(
    query: Query,
    *,
    page: int,
    per_page: int,
) -> Tuple[list[Any], int]:
    """
    Execute an offset-paginated query.

    The caller owns ordering. Returns the page of rows and the total count.
    """
    total = query.order_by(None).count()
    items = query.offset((page - 1) * per_page).limit(per_page).all()
    return items, total
