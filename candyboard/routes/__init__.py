from flask import jsonify, request

from candyboard.errors import ValidationError


def get_json_body():
    """Parse the request body as a JSON object or raise ValidationError"""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid request data")
    return data


def error_response(error):
    return jsonify(error.to_dict()), error.status_code
