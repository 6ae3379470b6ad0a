from .common import timestamps


def normalize_product(product):
    return {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "description": product.description,
        "image": product.image,
        "images": product.images or [],
        "price": product.price,
        "salePrice": product.sale_price,
        "retailPrice": product.retail_price,
        "brand": product.brand,
        "category": product.category,
        "stockQuantity": product.stock_quantity,
        "soldOut": product.is_sold_out,
        "isSale": bool(product.is_sale),
        "status": bool(product.status),
        **timestamps(product),
    }


def normalize_product_summary(product):
    if product is None:
        return None
    return {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "image": product.image,
        "price": product.price,
    }
