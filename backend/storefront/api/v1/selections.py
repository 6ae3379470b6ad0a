from flask import request
from flask_jwt_extended import get_jwt_identity, jwt_required
from storefront.application import selections as service
from storefront.normalizers.pagination import normalize_pagination
from storefront.normalizers.product import normalize_product
from storefront.normalizers.product_selection import empty_selection, normalize_selection
from storefront.utils.decorators import roles_required
from storefront.utils.pagination import get_page_args
from storefront.utils.responses import success_response
from . import v1_bp

CANDIDATES_PER_PAGE = 50


def _selection_body(selection, products_by_id):
    if selection is None:
        return empty_selection()
    return normalize_selection(selection, products_by_id)


def register_selection_routes(kind, *, prefix, candidates_path, name):
    """Public and admin routes for one curated product selection."""

    def selected():
        products = service.selected_products(kind)
        return success_response({"products": [normalize_product(p) for p in products]})

    @jwt_required()
    @roles_required("admin")
    def candidates():
        page_args = get_page_args(default_per_page=CANDIDATES_PER_PAGE)
        items, total = service.list_candidates(
            kind,
            search=request.args.get("search", ""),
            **page_args,
        )
        return success_response(
            normalize_pagination(items, normalize_product, total=total, **page_args),
            results=len(items),
        )

    @jwt_required()
    @roles_required("admin")
    def get_selection():
        selection, products_by_id = service.get_selection(kind)
        return success_response(_selection_body(selection, products_by_id))

    @jwt_required()
    @roles_required("admin")
    def replace_selection():
        data = request.get_json(silent=True) or {}
        selection, products_by_id = service.replace_selection(
            kind,
            product_ids=data.get("selectedProductIds"),
            is_active=data.get("isActive", True),
            actor_id=get_jwt_identity(),
        )
        return success_response(
            _selection_body(selection, products_by_id),
            message=f"{kind.label} updated successfully",
        )

    @jwt_required()
    @roles_required("admin")
    def toggle():
        data = request.get_json(silent=True) or {}
        is_active = data.get("isActive")
        selection, products_by_id = service.toggle_selection(
            kind,
            is_active=is_active,
            actor_id=get_jwt_identity(),
        )
        return success_response(
            _selection_body(selection, products_by_id),
            message=f"{kind.label} {'enabled' if is_active else 'disabled'} successfully",
        )

    v1_bp.add_url_rule(f"{prefix}/selected", f"{name}_selected", selected, methods=["GET"])
    v1_bp.add_url_rule(f"{prefix}/{candidates_path}", f"{name}_candidates", candidates, methods=["GET"])
    v1_bp.add_url_rule(f"{prefix}/selection", f"{name}_get_selection", get_selection, methods=["GET"])
    v1_bp.add_url_rule(f"{prefix}/selection", f"{name}_replace_selection", replace_selection, methods=["PUT"])
    v1_bp.add_url_rule(f"{prefix}/toggle", f"{name}_toggle", toggle, methods=["PATCH"])


register_selection_routes(
    service.POPUP_PRODUCTS,
    prefix="/popup-products",
    candidates_path="sold-products",
    name="popup_products",
)

register_selection_routes(
    service.SALE_ITEMS,
    prefix="/sale-items",
    candidates_path="sale-products",
    name="sale_items",
)
