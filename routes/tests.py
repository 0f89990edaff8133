from flask import Blueprint, request
from classes.test_manager import TestSubmissionManager, TEST_LABELS
from classes.validators import validate_submission
from utils.helpers import success_response, error_response, respond
from utils.student_service import get_student_by_id

test_bp = Blueprint("test", __name__)


def get_test(test_type):
    quiz = TestSubmissionManager.get_test_quiz(test_type)
    if not quiz:
        return error_response("NOT_FOUND", f"{TEST_LABELS[test_type].capitalize()} not found")

    return success_response({"quiz": quiz.to_dict()})


def submit_test(test_type):
    student_id, answers, _ = validate_submission(request.get_json(silent=True))

    if not get_student_by_id(student_id):
        return error_response("INVALID_STUDENT", "Student not found")

    quiz = TestSubmissionManager.get_test_quiz(test_type)
    if not quiz:
        return error_response("NOT_FOUND", f"{TEST_LABELS[test_type].capitalize()} not found")

    return respond(TestSubmissionManager.submit_test(student_id, test_type, quiz.id, answers))

# Pre-test questions, without answer keys
@test_bp.route("/pre-test", methods=["GET"])
def get_pre_test():
    return get_test("pre")

# Post-test questions, without answer keys
@test_bp.route("/post-test", methods=["GET"])
def get_post_test():
    return get_test("post")

# Has the student taken the test, and with what score
@test_bp.route("/<string:test_type>/status/<int:student_id>", methods=["GET"])
def get_test_status(test_type, student_id):
    if test_type not in TEST_LABELS:
        return error_response("INVALID_TEST_TYPE", 'Test type must be "pre" or "post"')

    result = TestSubmissionManager.get_student_test_result(student_id, test_type)

    return success_response({
        "hasTaken": result is not None,
        "result": {
            "score": result.score,
            "maxScore": result.max_score,
            "percentage": result.percentage,
            "completedAt": result.completed_at.isoformat(),
        } if result else None,
    })


@test_bp.route("/pre-test/submit", methods=["POST"])
def submit_pre_test():
    return submit_test("pre")


@test_bp.route("/post-test/submit", methods=["POST"])
def submit_post_test():
    return submit_test("post")
