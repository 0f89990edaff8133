from datetime import datetime
from models import db
from werkzeug.security import check_password_hash


class AdminUser(db.Model):
    __tablename__ = "admin_users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="teacher")  # 'teacher', 'admin'
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def check_password(self, password):
        """Checks if a given password matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<AdminUser {self.username} ({self.role})>"

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
