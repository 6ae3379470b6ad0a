def iso(value):
    return value.isoformat() if value else None


def timestamps(obj):
    return {
        "createdAt": iso(obj.created_at),
        "updatedAt": iso(obj.updated_at),
    }
