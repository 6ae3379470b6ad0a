from typing import Any, Callable, Dict, List, Tuple

from sqlalchemy import or_

from storefront.domain.invariants.fields import assert_boolean
from storefront.errors import ValidationError
from storefront.extensions import db
from storefront.models.product import Product
from storefront.models.product_selection import PopupProductSelection, SaleItemsSelection
from storefront.utils.pagination import paginate_offset
from storefront.utils.request_data import item_id
from storefront.utils.transaction import transactional


class SelectionKind:
    """
    A curated product list and the predicate its products must satisfy.
    """

    def __init__(
        self,
        model,
        eligible_clause: Callable[[], Any],
        is_eligible: Callable[[Product], bool],
        label: str,
        description: str,
    ):
        self.model = model
        self.eligible_clause = eligible_clause
        self.is_eligible = is_eligible
        self.label = label
        self.description = description


POPUP_PRODUCTS = SelectionKind(
    PopupProductSelection,
    Product.sold_out_clause,
    lambda product: product.is_sold_out,
    label="Popup product selection",
    description="sold out",
)

SALE_ITEMS = SelectionKind(
    SaleItemsSelection,
    Product.on_sale_clause,
    lambda product: product.is_on_sale,
    label="Sale items selection",
    description="on sale",
)


def _products_by_id(product_ids: List[str]) -> Dict[str, Product]:
    if not product_ids:
        return {}
    products = Product.query.filter(Product.id.in_(product_ids)).all()
    return {product.id: product for product in products}


def selected_products(kind: SelectionKind) -> List[Product]:
    """
    Products of the active selection, in stored order.

    Deleted products and products no longer eligible are skipped.
    """
    selection = kind.model.query.filter_by(is_active=True).order_by(kind.model.created_at.asc()).first()
    if not selection:
        return []

    product_ids = selection.ordered_product_ids()
    products_by_id = _products_by_id(product_ids)

    return [
        products_by_id[product_id]
        for product_id in product_ids
        if product_id in products_by_id and kind.is_eligible(products_by_id[product_id])
    ]


def list_candidates(
    kind: SelectionKind,
    *,
    search: str = "",
    page: int,
    per_page: int,
) -> Tuple[List[Product], int]:
    query = Product.query.filter(kind.eligible_clause())

    search = (search or "").strip()
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))

    return paginate_offset(
        query.order_by(Product.updated_at.desc()),
        page=page,
        per_page=per_page,
    )


def get_selection(kind: SelectionKind):
    """Returns ``(selection, products_by_id)``; selection is None when not configured."""
    selection = kind.model.current()
    if not selection:
        return None, {}

    product_ids = [entry.get("productId") for entry in selection.selected_products or []]
    return selection, _products_by_id(product_ids)


def replace_selection(
    kind: SelectionKind,
    *,
    product_ids: Any,
    is_active: Any = True,
    actor_id: str,
):
    if not isinstance(product_ids, list):
        raise ValidationError("selectedProductIds must be an array")

    product_ids = [item_id(entry) for entry in product_ids]
    if not all(isinstance(product_id, str) and product_id for product_id in product_ids):
        raise ValidationError("selectedProductIds must contain product ids")

    if is_active is None:
        is_active = True
    assert_boolean("isActive", is_active)

    unique_ids = set(product_ids)
    eligible = _products_by_id(list(unique_ids))
    eligible_ids = {pid for pid, product in eligible.items() if kind.is_eligible(product)}

    if len(unique_ids) != len(product_ids) or eligible_ids != unique_ids:
        raise ValidationError(f"Some products are not found or not {kind.description}")

    entries = [
        {"productId": product_id, "isSelected": True, "order": index}
        for index, product_id in enumerate(product_ids)
    ]

    selection = kind.model.current()
    with transactional():
        if selection is None:
            selection = kind.model()
            db.session.add(selection)
        selection.selected_products = entries
        selection.is_active = is_active
        selection.updated_by_id = actor_id

    return get_selection(kind)


def toggle_selection(kind: SelectionKind, *, is_active: Any, actor_id: str):
    assert_boolean("isActive", is_active)

    selection = kind.model.current()
    with transactional():
        if selection is None:
            selection = kind.model(selected_products=[])
            db.session.add(selection)
        selection.is_active = is_active
        selection.updated_by_id = actor_id

    return get_selection(kind)
