from datetime import datetime
from models import db


class Student(db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    student_code = db.Column(db.String(20), nullable=False, unique=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    # "metadata" is reserved on declarative models
    extra = db.Column("metadata", db.JSON, nullable=True)

    def __repr__(self):
        return f"<Student {self.student_code}>"

    def to_dict(self):
        return {
            "id": self.id,
            "studentCode": self.student_code,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "metadata": self.extra,
        }
