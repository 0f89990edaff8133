import datetime
import jwt
from flask import current_app


def get_jwt_token(user_data):
    """Generate JWT token with user payload"""
    if not user_data:
        raise ValueError("User data must be provided to generate JWT token")

    expiration = datetime.datetime.now(datetime.timezone.utc) + current_app.config["JWT_EXPIRATION"]
    payload = {"exp": expiration, **user_data}

    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=current_app.config["JWT_ALGORITHM"])


def decode_jwt(token):
    """Decode and validate a JWT token, returning None when it is expired or invalid."""
    try:
        return jwt.decode(
            token,
            current_app.config["JWT_SECRET"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
        )
    except jwt.ExpiredSignatureError:
        current_app.logger.info("Token expired")
        return None
    except jwt.InvalidTokenError:
        current_app.logger.info("Invalid token provided")
        return None


def get_bearer_token(request):
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None
