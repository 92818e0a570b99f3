# blogapi/errors.py
"""
Errores de la API y su traducción al sobre JSON ``{success: false, ...}``.

Los servicios lanzan estas excepciones; ``register_error_handlers`` las
convierte en respuestas con el código HTTP correspondiente.
"""
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from blogapi.extensions import db


class APIError(Exception):
    status_code = 500
    default_message = "Server Error"

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors

    def to_dict(self):
        body = {"success": False, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(APIError):
    status_code = 400
    default_message = "Validation failed"

    @classmethod
    def from_fields(cls, errors, message=None):
        """``errors`` es un dict campo -> mensaje."""
        return cls(
            message or "Validation failed",
            [{"field": field, "message": msg} for field, msg in errors.items()],
        )


class Unauthenticated(APIError):
    status_code = 401
    default_message = "Not authorized, token required"


class Forbidden(APIError):
    status_code = 403
    default_message = "Not authorized to perform this action"


class NotFound(APIError):
    status_code = 404
    default_message = "Resource not found"


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"success": False, "message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        db.session.rollback()
        current_app.logger.exception("❌ Error inesperado: %s", error)
        return jsonify({"success": False, "message": "Server Error"}), 500
