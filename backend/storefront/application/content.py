from datetime import datetime, timezone
from typing import List, Optional

from storefront.errors import NotFoundError, ValidationError
from storefront.extensions import db
from storefront.models.content import CONTENT_TYPES, Content
from storefront.utils.transaction import transactional

DEFAULT_CONTENT = {
    "product-condition-guidelines": (
        "Product Condition Guidelines",
        "<p>Every item is inspected and graded by our authentication team. "
        "Grades range from <strong>Pristine</strong> (never used) to <strong>Fair</strong> "
        "(visible signs of wear), and each listing describes any flaws.</p>",
    ),
    "terms-and-conditions": (
        "Terms and Conditions",
        "<p>By using this website you agree to these terms. All items are pre-owned "
        "and sold as described in the listing.</p>",
    ),
    "order-policy": (
        "Order Policy",
        "<p>Orders are confirmed once payment is received. Each item is unique, "
        "so orders are fulfilled on a first come, first served basis.</p>",
    ),
    "privacy-policy": (
        "Privacy Policy",
        "<p>We collect only the information required to process your orders and "
        "requests, and never sell your personal data.</p>",
    ),
    "shipping-and-delivery": (
        "Shipping and Delivery",
        "<p>Orders are dispatched within 2-3 business days after authentication. "
        "Tracking details are shared by email and SMS.</p>",
    ),
    "buyer-faq": (
        "Buyer FAQ",
        "<h3>Are the items authentic?</h3><p>Yes. Every item is authenticated before it is listed.</p>",
    ),
    "seller-faq": (
        "Seller FAQ",
        "<h3>How do I sell with you?</h3><p>Submit your item through Sell With Us and "
        "our team will contact you with a valuation.</p>",
    ),
}


def assert_content_type(content_type: str) -> None:
    if content_type not in CONTENT_TYPES:
        allowed = ", ".join(sorted(CONTENT_TYPES))
        raise ValidationError(f"Invalid content type '{content_type}'. Allowed: {allowed}")


def get_content(*, content_type: str) -> Content:
    content = (
        Content.query.filter_by(type=content_type)
        .order_by(Content.created_at.desc())
        .first()
    )
    if not content:
        raise NotFoundError(f"No content found for {content_type}")
    return content


def list_content() -> List[Content]:
    return Content.query.order_by(Content.type.asc()).all()


def upsert_content(
    *,
    content_type: str,
    title: Optional[str],
    body: Optional[str],
    actor_id: str,
) -> Content:
    if not title or not body:
        raise ValidationError("Title and content are required")

    assert_content_type(content_type)

    content = Content.query.filter_by(type=content_type).first()

    with transactional():
        if content is None:
            content = Content(type=content_type)
            db.session.add(content)

        content.title = title
        content.content = body
        content.last_updated = datetime.now(timezone.utc)
        content.updated_by_id = actor_id

    return content


def seed_default_content(*, actor_id: Optional[str] = None) -> List[Content]:
    """Insert the default body for every content type that has none yet."""
    existing = {row.type for row in Content.query.with_entities(Content.type)}
    created = []

    with transactional():
        for content_type, (title, body) in DEFAULT_CONTENT.items():
            if content_type in existing:
                continue
            content = Content(
                type=content_type,
                title=title,
                content=body,
                updated_by_id=actor_id,
            )
            db.session.add(content)
            created.append(content)

    return created
