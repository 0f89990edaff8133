from datetime import datetime
from models import db

class QuizAttempt(db.Model):
    __tablename__ = "quiz_attempts"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey("students.id"), nullable=False)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id"), nullable=False)
    answers = db.Column(db.JSON, nullable=False, default=list)
    score = db.Column(db.Integer, nullable=False, default=0)
    max_score = db.Column(db.Integer, nullable=False, default=0)
    time_taken = db.Column(db.Integer, nullable=True)
    completed_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    quiz = db.relationship("Quiz", backref=db.backref("attempts", lazy=True))
    student = db.relationship("Student", backref=db.backref("quiz_attempts", lazy=True))

    def to_dict(self):
        return {
            "id": self.id,
            "studentId": self.student_id,
            "quizId": self.quiz_id,
            "answers": self.answers or [],
            "score": self.score,
            "maxScore": self.max_score,
            "timeTaken": self.time_taken,
            "completedAt": self.completed_at.isoformat() if self.completed_at else None,
        }
