from models import db

QUIZ_TYPES = ("practice", "pre_test", "post_test")


class Quiz(db.Model):
    __tablename__ = "quizzes"

    id = db.Column(db.Integer, primary_key=True)
    topic_id = db.Column(db.Integer, db.ForeignKey("topics.id"), nullable=True)
    title = db.Column(db.String(255), nullable=False)
    quiz_type = db.Column(db.String(20), nullable=False, default="practice")
    # ordered list of {id, questionText, options, correctAnswer, explanation}
    questions = db.Column(db.JSON, nullable=False, default=list)
    passing_score = db.Column(db.Integer, nullable=True)

    topic = db.relationship("Topic", backref=db.backref("quizzes", lazy=True))

    @property
    def total_questions(self):
        """Dynamically count total questions without storing in the database"""
        return len(self.questions or [])

    def __repr__(self):
        return f"<Quiz {self.title} ({self.quiz_type})>"

    def to_dict(self):
        """Serialize the quiz for students; answer keys and explanations are left out."""
        questions = [
            {
                "id": q.get("id"),
                "questionText": q.get("questionText"),
                "options": q.get("options", []),
            }
            for q in self.questions or []
        ]
        return {
            "id": self.id,
            "topicId": self.topic_id,
            "title": self.title,
            "quizType": self.quiz_type,
            "questions": questions,
            "passingScore": self.passing_score,
        }
