from .common import timestamps
from .product import normalize_product_summary
from .user import normalize_user_ref


def normalize_quote_request(quote):
    return {
        "id": quote.id,
        "referenceNumber": quote.reference_number,
        "product": normalize_product_summary(quote.product),
        "productId": quote.product_id,
        "user": normalize_user_ref(quote.user),
        "isGuest": quote.is_guest,
        "fullName": quote.full_name,
        "email": quote.email,
        "phone": quote.phone,
        "whatsapp": quote.whatsapp,
        "price": quote.price,
        "quantity": quote.quantity,
        "message": quote.message,
        "productUrl": quote.product_url,
        "status": quote.status,
        **timestamps(quote),
    }
