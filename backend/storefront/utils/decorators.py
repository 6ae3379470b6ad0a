from functools import wraps
from flask_jwt_extended import get_jwt
from storefront.errors import error_response


def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return error_response("Insufficient permissions", 403)

            return fn(*args, **kwargs)
        return wrapper
    return decorator
