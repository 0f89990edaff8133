import os

os.environ["FLASK_ENV"] = "testing"

import pytest
from app import create_app
from models import db
from models.content import Content
from models.quizzes import Quiz
from models.topics import Topic
from utils.auth_service import create_admin_user
from utils.student_service import get_or_create_student
from tests_support import PRE_TEST_QUESTIONS, POST_TEST_QUESTIONS, PRACTICE_QUESTIONS


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def quizzes(app):
    topic = Topic(name="Area and Perimeter", slug="area-perimeter", description="Rectangles", order_index=1)
    db.session.add(topic)
    db.session.flush()

    db.session.add_all([
        Content(topic_id=topic.id, content_type="tutorial", title="Area", body="width x height", order_index=2),
        Content(topic_id=topic.id, content_type="formula", title="Perimeter", body="2(w + h)", order_index=1),
    ])

    pre = Quiz(title="Pre-Test", quiz_type="pre_test", questions=PRE_TEST_QUESTIONS)
    post = Quiz(title="Post-Test", quiz_type="post_test", questions=POST_TEST_QUESTIONS)
    practice = Quiz(title="Area practice", quiz_type="practice", topic_id=topic.id,
                    questions=PRACTICE_QUESTIONS, passing_score=50)
    db.session.add_all([pre, post, practice])
    db.session.commit()

    return {"topic": topic, "pre": pre, "post": post, "practice": practice}


@pytest.fixture
def student(app):
    return get_or_create_student("STUDENT_007")


@pytest.fixture
def admin_token(client):
    create_admin_user("admin", "secret123", "admin")
    response = client.post("/api/auth/login", json={"username": "admin", "password": "secret123"})
    return response.get_json()["data"]["token"]
