from flask import Blueprint, request
from classes.repository import Repository
from classes.test_manager import QuizAttemptManager
from classes.validators import validate_submission
from models.quizzes import Quiz
from utils.helpers import success_response, error_response, respond
from utils.student_service import get_student_by_id

quiz_bp = Blueprint("quiz", __name__)

# Practice quiz for a topic, without answer keys
@quiz_bp.route("/topic/<int:topic_id>", methods=["GET"])
def get_topic_quiz(topic_id):
    quiz = QuizAttemptManager.get_quiz_by_topic_id(topic_id)
    if not quiz:
        return error_response("NOT_FOUND", "Quiz not found for this topic")

    return success_response({"quiz": quiz.to_dict()})


@quiz_bp.route("/<int:quiz_id>", methods=["GET"])
def get_quiz(quiz_id):
    quiz = Repository.find_one(Quiz, id=quiz_id)
    if not quiz:
        return error_response("NOT_FOUND", "Quiz not found")

    return success_response({"quiz": quiz.to_dict()})

# Submit a practice attempt; attempts are unlimited
@quiz_bp.route("/<int:quiz_id>/submit", methods=["POST"])
def submit_quiz(quiz_id):
    student_id, answers, time_taken = validate_submission(request.get_json(silent=True), allow_time_taken=True)

    if not get_student_by_id(student_id):
        return error_response("INVALID_STUDENT", "Student not found")

    return respond(QuizAttemptManager.submit_quiz_attempt(student_id, quiz_id, answers, time_taken))

# A student's attempts at a quiz, newest first
@quiz_bp.route("/<int:quiz_id>/attempts/<int:student_id>", methods=["GET"])
def get_quiz_attempts(quiz_id, student_id):
    attempts = QuizAttemptManager.get_student_quiz_attempts(student_id, quiz_id)
    return success_response({"attempts": [attempt.to_dict() for attempt in attempts]})
