import re

STUDENT_CODE_PATTERN = re.compile(r"^STUDENT_\d{3}$")


class ValidationError(ValueError):
    """Malformed request input; ``details`` maps field names to messages."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


def validate_length(field_name, value, min_length, max_length, errors):
    if not isinstance(value, str):
        errors.setdefault(field_name, []).append(f"{field_name} is required.")
    elif len(value) < min_length:
        errors.setdefault(field_name, []).append(f"{field_name} must be at least {min_length} characters.")
    elif len(value) > max_length:
        errors.setdefault(field_name, []).append(f"{field_name} must be at most {max_length} characters.")


def require_object(data):
    """A missing body validates field by field; any other non-object body is rejected."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Invalid input", {"body": ["Request body must be a JSON object."]})
    return data


def is_valid_student_code(code):
    return isinstance(code, str) and bool(STUDENT_CODE_PATTERN.match(code))


def validate_student_code(data):
    """Validate a student entry body and return the student code."""
    code = require_object(data).get("studentCode")
    if not is_valid_student_code(code):
        raise ValidationError(
            "Invalid student code format",
            {"studentCode": ["Student code must be in format STUDENT_XXX (e.g., STUDENT_001)"]},
        )
    return code


def validate_login(data):
    data = require_object(data)
    errors = {}
    validate_length("username", data.get("username"), 3, 100, errors)
    validate_length("password", data.get("password"), 6, 100, errors)
    if errors:
        raise ValidationError("Invalid input", errors)
    return data["username"], data["password"]


def validate_submission(data, allow_time_taken=False):
    """Validate a quiz/test submission body.

    Returns ``(student_id, answers, time_taken)`` where answers is a list of
    ``{"questionId": str, "answer": str}`` dicts.
    """
    data = require_object(data)
    errors = {}

    student_id = data.get("studentId")
    if isinstance(student_id, bool) or not isinstance(student_id, int):
        errors["studentId"] = ["studentId must be an integer."]

    answers = data.get("answers")
    if not isinstance(answers, list):
        errors["answers"] = ["answers must be a list."]
    else:
        for index, answer in enumerate(answers):
            if (not isinstance(answer, dict)
                    or not isinstance(answer.get("questionId"), str)
                    or not isinstance(answer.get("answer"), str)):
                errors.setdefault("answers", []).append(
                    f"answers[{index}] must have string 'questionId' and 'answer'."
                )

    time_taken = data.get("timeTaken") if allow_time_taken else None
    if time_taken is not None and (isinstance(time_taken, bool) or not isinstance(time_taken, (int, float))):
        errors["timeTaken"] = ["timeTaken must be a number."]

    if errors:
        raise ValidationError("Invalid input", errors)

    answers = [{"questionId": a["questionId"], "answer": a["answer"]} for a in answers]
    return student_id, answers, int(time_taken) if time_taken is not None else None
