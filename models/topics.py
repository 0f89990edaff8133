from models import db


class Topic(db.Model):
    __tablename__ = "topics"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    contents = db.relationship("Content", back_populates="topic", cascade="all, delete-orphan",
                               order_by="Content.order_index")

    def __repr__(self):
        return f"<Topic {self.slug}>"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "orderIndex": self.order_index,
        }
