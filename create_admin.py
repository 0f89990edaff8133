import sys
from app import app
from utils.auth_service import create_admin_user

# usage: python create_admin.py <username> <password> [teacher|admin]
if len(sys.argv) < 3:
    print("Usage: python create_admin.py <username> <password> [teacher|admin]")
    sys.exit(1)

username, password = sys.argv[1], sys.argv[2]
role = sys.argv[3] if len(sys.argv) > 3 else "admin"

with app.app_context():
    result = create_admin_user(username, password, role)
    if result.success:
        print(f"Created {role} '{username}'.")
    else:
        print(result.message)
        sys.exit(1)
