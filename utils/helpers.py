from flask import jsonify
from classes.results import Ok, Err


def format_datetime(datetime_obj):
    """ISO-8601 string or None."""
    if not datetime_obj:
        return None
    return datetime_obj.isoformat()


def success_response(data=None, status=200):
    return jsonify({"success": True, "data": data}), status


def error_response(code, message, details=None):
    return respond(Err(code, message, details))


def respond(result):
    """Render an ``Ok`` / ``Err`` result as the JSON response envelope."""
    if isinstance(result, Ok):
        return success_response(result.data, result.status)
    if isinstance(result, Err):
        return jsonify({"success": False, "error": result.to_dict()}), result.status
    raise TypeError(f"Cannot render {type(result).__name__} as a response")
