from typing import Any, Dict, List, Optional

from storefront.errors import NotFoundError, PermissionDenied, ValidationError
from storefront.extensions import db
from storefront.models.product_request import ProductRequest
from storefront.services.email import send_product_request_emails
from storefront.utils.transaction import transactional

REQUIRED_FIELDS = ("name", "description", "budget", "contactEmail")


def create_product_request(*, data: Dict[str, Any], user_id: Optional[str] = None) -> ProductRequest:
    """
    Record a sourcing request from a guest or signed-in customer, then
    email the consignment inbox and the requester.
    """
    missing = [field for field in REQUIRED_FIELDS if data.get(field) in (None, "")]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    try:
        budget = float(data["budget"])
    except (TypeError, ValueError):
        raise ValidationError("budget must be a number")
    if budget < 0:
        raise ValidationError("budget must not be negative")

    product_request = ProductRequest(
        name=data["name"],
        description=data["description"],
        budget=budget,
        contact_email=data["contactEmail"],
        contact_phone=data.get("contactPhone"),
        reference_image=data.get("referenceImage"),
        is_guest=user_id is None,
        requested_by_id=user_id,
    )

    with transactional():
        db.session.add(product_request)

    send_product_request_emails(product_request)
    return product_request


def list_product_requests(*, status: Optional[str] = None) -> List[ProductRequest]:
    query = ProductRequest.query
    if status:
        query = query.filter_by(status=status)
    return query.order_by(ProductRequest.created_at.desc()).all()


def list_user_product_requests(*, user_id: str) -> List[ProductRequest]:
    return (
        ProductRequest.query.filter_by(requested_by_id=user_id)
        .order_by(ProductRequest.created_at.desc())
        .all()
    )


def get_product_request(*, request_id: str, user_id: str, is_admin: bool) -> ProductRequest:
    product_request = db.session.get(ProductRequest, request_id)
    if not product_request:
        raise NotFoundError("Product request not found")

    if not is_admin and product_request.requested_by_id != user_id:
        raise PermissionDenied("You are not authorized to access this product request")

    return product_request


def update_product_request(
    *,
    request_id: str,
    status: Optional[str],
    admin_notes: Optional[str] = None,
) -> ProductRequest:
    product_request = db.session.get(ProductRequest, request_id)
    if not product_request:
        raise NotFoundError("Product request not found")

    with transactional():
        if status is not None:
            product_request.status = status
        product_request.admin_notes = admin_notes or ""

    return product_request
