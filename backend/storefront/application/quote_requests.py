from typing import Any, Dict, List, Optional, Tuple

from dateutil import parser as date_parser
from flask import current_app

from storefront.errors import NotFoundError, ValidationError
from storefront.extensions import db
from storefront.models.product import Product
from storefront.models.quote_request import QuoteRequest
from storefront.services.email import send_quote_request_emails
from storefront.utils.pagination import paginate_offset
from storefront.utils.reference import generate_reference_number
from storefront.utils.transaction import transactional

REQUIRED_FIELDS = ("productId", "fullName", "email", "phone", "price", "url")


def _reference_taken(candidate: str) -> bool:
    return db.session.query(
        QuoteRequest.query.filter_by(reference_number=candidate).exists()
    ).scalar()


def create_quote_request(*, data: Dict[str, Any], user_id: Optional[str] = None) -> QuoteRequest:
    """
    Record a price offer on a product.

    - ``productUrl`` is the storefront URL of the product page
    - a ``QR<YYYYMMDD>-<4 digits>`` reference is allocated
    - admin and customer emails are sent after commit
    """
    missing = [field for field in REQUIRED_FIELDS if data.get(field) in (None, "")]
    if missing:
        raise ValidationError("Please provide all required fields")

    product = db.session.get(Product, data["productId"])
    if not product:
        raise NotFoundError("Product not found")

    frontend_url = current_app.config.get("FRONTEND_URL") or ""
    product_url = f"{frontend_url}{data['url']}" if frontend_url else ""
    quantity = data.get("quantity")

    quote = QuoteRequest(
        product_id=product.id,
        user_id=user_id,
        is_guest=user_id is None,
        full_name=data["fullName"],
        email=data["email"],
        phone=str(data["phone"]),
        whatsapp=str(data.get("whatsapp") or ""),
        price=str(data["price"]),
        quantity=1 if quantity in (None, "") else quantity,
        message=data.get("message") or "",
        product_url=product_url,
        reference_number=generate_reference_number(_reference_taken),
    )

    with transactional():
        db.session.add(quote)

    current_app.logger.info("Quote request %s created for product %s", quote.reference_number, product.id)

    send_quote_request_emails(quote, product)
    return quote


def _parse_date(value: str, field: str):
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid {field}")


def list_quote_requests(
    *,
    filters: Dict[str, Any],
    page: int,
    per_page: int,
) -> Tuple[List[QuoteRequest], int]:
    query = QuoteRequest.query

    if filters.get("status"):
        query = query.filter(QuoteRequest.status == filters["status"])
    if filters.get("productId"):
        query = query.filter(QuoteRequest.product_id == filters["productId"])
    if filters.get("startDate") and filters.get("endDate"):
        start = _parse_date(filters["startDate"], "startDate")
        end = _parse_date(filters["endDate"], "endDate")
        query = query.filter(QuoteRequest.created_at >= start, QuoteRequest.created_at <= end)

    return paginate_offset(
        query.order_by(QuoteRequest.created_at.desc()),
        page=page,
        per_page=per_page,
    )


def update_quote_status(*, quote_id: str, status: Optional[str]) -> QuoteRequest:
    if not status:
        raise ValidationError("Status is required")

    quote = db.session.get(QuoteRequest, quote_id)
    if not quote:
        raise NotFoundError("Quote request not found")

    with transactional():
        quote.status = status

    return quote
