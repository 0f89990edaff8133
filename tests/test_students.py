import utils.student_service as student_service
from classes.repository import Repository
from models.students import Student


def test_get_or_create_student_is_idempotent(app):
    first = student_service.get_or_create_student("STUDENT_001")
    second = student_service.get_or_create_student("STUDENT_001")

    assert first.id == second.id
    assert Repository.count_where(Student, student_code="STUDENT_001") == 1


def test_concurrent_creation_returns_existing_student(app, monkeypatch):
    existing = student_service.get_or_create_student("STUDENT_002")
    real_lookup = student_service.get_student_by_code
    calls = []

    def stale_lookup(code):
        calls.append(code)
        # the first lookup ran before the other request's insert committed
        return None if len(calls) == 1 else real_lookup(code)

    monkeypatch.setattr(student_service, "get_student_by_code", stale_lookup)

    student = student_service.get_or_create_student("STUDENT_002")

    assert student.id == existing.id
    assert len(calls) == 2
    assert Repository.count_where(Student, student_code="STUDENT_002") == 1


def test_enter_creates_student_with_progress(client):
    response = client.post("/api/students/enter", json={"studentCode": "STUDENT_010"})
    body = response.get_json()

    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"]["student"]["studentCode"] == "STUDENT_010"
    assert body["data"]["progress"]["state"] == "NOT_STARTED"


def test_enter_rejects_bad_code(client):
    response = client.post("/api/students/enter", json={"studentCode": "student_10"})
    body = response.get_json()

    assert response.status_code == 400
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "studentCode" in body["error"]["details"]


def test_get_student_by_code(client, student):
    response = client.get("/api/students/STUDENT_007")

    assert response.status_code == 200
    assert response.get_json()["data"]["student"]["id"] == student.id


def test_get_unknown_student(client):
    assert client.get("/api/students/STUDENT_999").status_code == 404
    assert client.get("/api/students/nope").get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_student_progress_route(client, quizzes, student):
    client.post("/api/tests/pre-test/submit", json={"studentId": student.id, "answers": []})

    response = client.get("/api/students/STUDENT_007/progress")

    assert response.get_json()["data"]["progress"]["state"] == "PRE_TEST_DONE"
