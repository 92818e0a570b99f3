# blogapi/utils/responses.py
from flask import jsonify, request

from blogapi.errors import ValidationError


def success(data=None, status=200, message=None, **extra):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return jsonify(body), status


def request_payload():
    """Campos del request: multipart/form o JSON, según lo que envíe el cliente."""
    if request.form:
        return request.form.to_dict()
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
