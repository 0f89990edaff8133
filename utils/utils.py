from functools import wraps
from flask import request, g
from utils.tokens import decode_jwt, get_bearer_token
from utils.helpers import error_response


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = get_bearer_token(request)
        if not token:
            return error_response("UNAUTHORIZED", "Authentication required")

        decoded = decode_jwt(token)
        if not decoded:
            return error_response("UNAUTHORIZED", "Invalid or expired token")

        g.user = decoded
        return f(*args, **kwargs)

    return decorated_function


STAFF_ROLES = ("teacher", "admin")


def staff_required(f):
    """Require a token issued to an admin_users account (teacher or admin)."""
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if g.user.get("role") not in STAFF_ROLES:
            return error_response("FORBIDDEN", "Admin access required")
        return f(*args, **kwargs)

    return decorated_function
