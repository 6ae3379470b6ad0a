from .common import iso, timestamps
from .user import normalize_user_ref


def normalize_content(content, admin=False):
    data = {
        "id": content.id,
        "type": content.type,
        "title": content.title,
        "content": content.content,
        "lastUpdated": iso(content.last_updated),
        **timestamps(content),
    }

    if admin:
        data["updatedBy"] = normalize_user_ref(content.updated_by)

    return data
