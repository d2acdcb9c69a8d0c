# content_admin/errors.py
"""
API errors.

Every failure leaves the API as a JSON body with an ``error`` message and,
when there is something useful for an operator, a ``details`` field.
"""
import logging

from flask import jsonify
from pydantic import ValidationError as PayloadError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, details=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_dict(self):
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidCredentials(ApiError):
    status_code = 401
    message = "Invalid username or password"


class Unauthenticated(ApiError):
    status_code = 401
    message = "Authentication required"


class Forbidden(ApiError):
    status_code = 403
    message = "Admin access required"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request"


class Conflict(ApiError):
    status_code = 409
    message = "Resource already exists"


class Internal(ApiError):
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(PayloadError)
    def handle_payload_error(exc):
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        return jsonify({"error": "Invalid payload", "details": details}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(exc):
        logger.exception("Storage error while handling request")
        return jsonify({"error": "Storage error", "details": str(exc)}), 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Unexpected error while handling request")
        return jsonify(Internal(details=str(exc)).to_dict()), 500
