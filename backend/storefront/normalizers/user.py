from .common import timestamps


def normalize_user(user):
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "role": user.role,
        "isActive": user.is_active,
        **timestamps(user),
    }


def normalize_user_ref(user):
    """Populated reference, as embedded in other documents."""
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "email": user.email}
