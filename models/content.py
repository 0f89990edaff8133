from models import db

CONTENT_TYPES = ("formula", "tutorial", "step")


class Content(db.Model):
    __tablename__ = "content"

    id = db.Column(db.Integer, primary_key=True)
    topic_id = db.Column(db.Integer, db.ForeignKey("topics.id"), nullable=False)
    content_type = db.Column(db.String(20), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    extra = db.Column("metadata", db.JSON, nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    topic = db.relationship("Topic", back_populates="contents")

    def to_dict(self):
        return {
            "id": self.id,
            "topicId": self.topic_id,
            "contentType": self.content_type,
            "title": self.title,
            "body": self.body,
            "metadata": self.extra,
            "orderIndex": self.order_index,
        }
