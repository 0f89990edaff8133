from flask import Blueprint, request
from classes.progress_manager import ProgressManager
from classes.validators import validate_student_code, is_valid_student_code
from utils.helpers import success_response, error_response
from utils.student_service import get_or_create_student, get_student_by_code

student_bp = Blueprint("student", __name__)

# Student enters with their code; created on first entry
@student_bp.route("/enter", methods=["POST"])
def enter():
    student_code = validate_student_code(request.get_json(silent=True))

    student = get_or_create_student(student_code)

    return success_response({
        "student": student.to_dict(),
        "progress": ProgressManager.get_student_progress(student.id),
    })

# Fetch student by code
@student_bp.route("/<string:code>", methods=["GET"])
def get_student(code):
    if not is_valid_student_code(code):
        return error_response("VALIDATION_ERROR", "Invalid student code format")

    student = get_student_by_code(code)
    if not student:
        return error_response("NOT_FOUND", "Student not found")

    return success_response({
        "student": student.to_dict(),
        "progress": ProgressManager.get_student_progress(student.id),
    })

# Student progress
@student_bp.route("/<string:code>/progress", methods=["GET"])
def get_progress(code):
    student = get_student_by_code(code)
    if not student:
        return error_response("NOT_FOUND", "Student not found")

    return success_response({"progress": ProgressManager.get_student_progress(student.id)})
