from flask import Blueprint, request, g
from classes.validators import validate_login
from utils.auth_service import verify_login, get_admin_user_by_id
from utils.helpers import success_response, error_response, respond
from utils.tokens import get_jwt_token, decode_jwt, get_bearer_token
from utils.utils import login_required

auth_bp = Blueprint('auth_bp', __name__)

# Login
@auth_bp.route('/login', methods=['POST'])
def login():
    username, password = validate_login(request.get_json(silent=True))

    result = verify_login(username, password)
    if not result.success:
        return respond(result)

    user = result.data
    token = get_jwt_token({
        "id": user.id,
        "username": user.username,
        "role": user.role,
    })

    return success_response({"token": token, "user": user.to_dict()})

# Current user
@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    user = get_admin_user_by_id(g.user.get("id"))
    if not user:
        return error_response("USER_NOT_FOUND", "User not found")

    return success_response({"user": user.to_dict()})

# Logout: tokens are stateless, the client discards its copy
@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    return success_response({"message": "Logged out successfully"})

# Token check
@auth_bp.route('/verify', methods=['POST'])
def verify():
    token = get_bearer_token(request)
    if not token:
        return error_response("NO_TOKEN", "No token provided")

    payload = decode_jwt(token)
    if not payload:
        return success_response({"valid": False})

    return success_response({"valid": True, "payload": payload})
