# responses.py
# Small helpers shared by both blueprints.
from flask import jsonify, request


def ok(status=200):
    return (jsonify({"success": True}), status)


def err(msg="error", status=400):
    return (jsonify({"error": msg}), status)


def request_data():
    """
    Request body as a dict, JSON or urlencoded form.

    A JSON content type with an unparsable body aborts with 400 (Flask
    raises BadRequest); anything else falls back to the form fields.
    """
    if request.is_json:
        data = request.get_json()
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()
