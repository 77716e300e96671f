from flask import current_app, jsonify, request
from functools import wraps


def success_response(message, status_code=200):
    """Create a standardized success response"""
    response = {
        "success": True,
        "message": message,
    }
    return jsonify(response), status_code


def error_response(message, status_code=400, errors=None):
    """Create a standardized error response"""
    response = {
        "success": False,
        "message": message,
    }
    if errors is not None:
        response["errors"] = [error.to_dict() for error in errors]
    return jsonify(response), status_code


def get_relay_service():
    return current_app.extensions['relay_service']


def with_form_data(f):
    """
    Decorator passing the JSON body to the view as `data`.

    A missing, malformed or non-object body becomes an empty dict so the
    form rules report every required field.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        # force=True accepts bodies sent without a JSON content type
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            current_app.logger.debug("Request body is not a JSON object, validating as empty form")
            data = {}
        return f(data, *args, **kwargs)
    return decorated_function
