from .common import timestamps
from .user import normalize_user_ref


def normalize_menu(menu):
    return {
        "id": menu.id,
        "code": menu.code,
        "name": menu.name,
        "slug": menu.slug,
        "status": menu.status,
        "postBy": normalize_user_ref(menu.post_by),
        **timestamps(menu),
    }
