from classes.repository import Repository
from classes.results import Ok, Err, ConflictExisting
from models.admin_users import AdminUser
from werkzeug.security import generate_password_hash


def verify_login(username, password):
    user = Repository.find_one(AdminUser, username=username)
    if not user or not user.check_password(password):
        return Err("INVALID_CREDENTIALS", "Invalid username or password")
    return Ok(user)


def create_admin_user(username, password, role="teacher"):
    if role not in ("teacher", "admin"):
        raise ValueError("Role must be 'teacher' or 'admin'")

    outcome = Repository.insert_one(
        AdminUser,
        unique_on=("username",),
        username=username,
        password_hash=generate_password_hash(password, method="pbkdf2:sha256"),
        role=role,
    )
    if isinstance(outcome, ConflictExisting):
        return Err("VALIDATION_ERROR", "Username already exists", {"username": ["Username already exists"]})
    return Ok(outcome.row)


def get_admin_user_by_id(user_id):
    return Repository.find_one(AdminUser, id=user_id)
