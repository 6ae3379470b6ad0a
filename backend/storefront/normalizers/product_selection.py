from .common import timestamps
from .product import normalize_product
from .user import normalize_user_ref


def normalize_selection(selection, products_by_id=None):
    """
    Selection with each entry's product populated from ``products_by_id``.
    Entries whose product no longer exists keep ``product: None``.
    """
    products_by_id = products_by_id or {}

    entries = []
    for entry in sorted(selection.selected_products or [], key=lambda e: e.get("order", 0)):
        product = products_by_id.get(entry.get("productId"))
        entries.append({
            "productId": entry.get("productId"),
            "isSelected": entry.get("isSelected", True),
            "order": entry.get("order", 0),
            "product": normalize_product(product) if product else None,
        })

    return {
        "id": selection.id,
        "selectedProducts": entries,
        "isActive": selection.is_active,
        "updatedBy": normalize_user_ref(selection.updated_by),
        **timestamps(selection),
    }


def empty_selection():
    return {
        "id": None,
        "selectedProducts": [],
        "isActive": True,
        "updatedBy": None,
        "createdAt": None,
        "updatedAt": None,
    }
