from .common import timestamps
from .user import normalize_user_ref


def normalize_product_request(product_request, admin=False):
    data = {
        "id": product_request.id,
        "name": product_request.name,
        "description": product_request.description,
        "budget": product_request.budget,
        "contactEmail": product_request.contact_email,
        "contactPhone": product_request.contact_phone,
        "referenceImage": product_request.reference_image,
        "isGuest": product_request.is_guest,
        "status": product_request.status,
        "requestedBy": normalize_user_ref(product_request.requested_by),
        **timestamps(product_request),
    }

    if admin:
        data["adminNotes"] = product_request.admin_notes

    return data
