import csv
import io
import json
from classes.test_manager import TestSubmissionManager
from utils.admin_service import get_dashboard_stats, get_all_student_results
from utils.student_service import get_or_create_student
from utils.tokens import get_jwt_token
from tests_support import answers


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def seed_results(quizzes):
    """STUDENT_001: pre 25%, post 100%. STUDENT_002: pre 75%. STUDENT_003: nothing."""
    first = get_or_create_student("STUDENT_001")
    second = get_or_create_student("STUDENT_002")
    get_or_create_student("STUDENT_003")

    TestSubmissionManager.submit_test(first.id, "pre", quizzes["pre"].id, answers(("q1", "4")))
    TestSubmissionManager.submit_test(first.id, "post", quizzes["post"].id, answers(("p1", "6"), ("p2", "5")))
    TestSubmissionManager.submit_test(
        second.id, "pre", quizzes["pre"].id, answers(("q1", "4"), ("q2", "Paris"), ("q3", "H2O")),
    )


def test_dashboard_stats(quizzes):
    seed_results(quizzes)

    assert get_dashboard_stats() == {
        "totalStudents": 3,
        "preTestCompleted": 2,
        "postTestCompleted": 1,
        "averagePreScore": 50,
        "averagePostScore": 100,
        "improvement": 50,
    }


def test_dashboard_stats_without_results(app):
    stats = get_dashboard_stats()

    assert stats["averagePreScore"] == 0
    assert stats["improvement"] == 0


def test_student_results(quizzes):
    seed_results(quizzes)

    rows = {row["studentCode"]: row for row in get_all_student_results()}

    assert list(rows) == ["STUDENT_001", "STUDENT_002", "STUDENT_003"]
    assert rows["STUDENT_001"]["scoreDifference"] == 75
    assert rows["STUDENT_001"]["improvementPercentage"] == 300
    assert rows["STUDENT_002"]["postTestScore"] is None
    assert rows["STUDENT_002"]["scoreDifference"] is None
    assert rows["STUDENT_003"]["preTestDate"] is None


def test_admin_routes_require_token(client):
    assert client.get("/api/admin/stats").status_code == 401


def test_admin_routes_reject_non_staff_roles(client):
    token = get_jwt_token({"id": 1, "username": "visitor", "role": "student"})

    response = client.get("/api/admin/stats", headers=auth_header(token))

    assert response.status_code == 403
    assert response.get_json()["error"] == {"code": "FORBIDDEN", "message": "Admin access required"}


def test_stats_route(client, quizzes, admin_token):
    seed_results(quizzes)

    body = client.get("/api/admin/stats", headers=auth_header(admin_token)).get_json()

    assert body["data"]["stats"]["totalStudents"] == 3


def test_results_route(client, quizzes, admin_token):
    seed_results(quizzes)

    results = client.get("/api/admin/results", headers=auth_header(admin_token)).get_json()["data"]["results"]

    assert len(results) == 3


def test_csv_export(client, quizzes, admin_token):
    seed_results(quizzes)

    response = client.get("/api/admin/export/csv", headers=auth_header(admin_token))
    rows = list(csv.reader(io.StringIO(response.get_data(as_text=True))))

    assert response.mimetype == "text/csv"
    assert response.headers["Content-Disposition"].startswith('attachment; filename="mathevolve-results-')
    assert rows[0][0] == "Student Code"
    assert rows[1][:5] == ["STUDENT_001", "25", "100", "75", "300"]
    assert rows[3][1:] == ["N/A"] * 6


def test_json_export(client, quizzes, admin_token):
    seed_results(quizzes)

    response = client.get("/api/admin/export/json", headers=auth_header(admin_token))
    payload = json.loads(response.get_data(as_text=True))

    assert response.mimetype == "application/json"
    assert payload["summary"] == {
        "totalStudents": 3,
        "totalTestResults": 3,
        "preTestCount": 2,
        "postTestCount": 1,
    }
    assert {r["studentCode"] for r in payload["testResults"]} == {"STUDENT_001", "STUDENT_002"}


def test_export_without_data(client, admin_token):
    response = client.get("/api/admin/export/csv", headers=auth_header(admin_token))

    assert response.status_code == 400
    assert response.get_json()["error"] == {"code": "EXPORT_ERROR", "message": "No data to export"}
