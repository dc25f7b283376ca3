"""
Error taxonomy and the single place that turns exceptions into JSON.

Services and the policy only *raise* ApiError subclasses; the handlers
registered by register_error_handlers() map them (and library errors from
pydantic / SQLAlchemy / Werkzeug) onto the response envelope.
"""

from __future__ import annotations

import logging

from flask import Flask, current_app, request
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound
from werkzeug.exceptions import HTTPException

from extensions import db
from utils import send_error

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None,
                 errors: list[dict] | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors
        super().__init__(self.message)


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Conflict"


def validation_errors(exc: ValidationError) -> list[dict]:
    """Flatten pydantic errors to [{field, message}]."""
    out = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        # "Value error, Password must ..." -> "Password must ..."
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append({"field": field, "message": msg})
    return out


def _integrity_response(exc: IntegrityError):
    text = str(getattr(exc, "orig", exc)).lower()
    if "unique" in text or "duplicate" in text:
        # sqlite: "UNIQUE constraint failed: users.email"
        field = "field"
        if ":" in text:
            field = text.rsplit(":", 1)[1].strip().split(".")[-1] or field
        return send_error(f"A record with this {field} already exists", 409)
    if "foreign key" in text:
        return send_error("Related record not found", 400)
    return send_error("Database error", 500)


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(ValidationError)
    def handle_validation(exc: ValidationError):
        return send_error("Validation failed", 400, validation_errors(exc))

    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        if exc.status_code >= 500:
            logger.error("API error on %s %s: %s", request.method, request.path, exc.message)
        return send_error(exc.message, exc.status_code, exc.errors)

    @app.errorhandler(IntegrityError)
    def handle_integrity(exc: IntegrityError):
        db.session.rollback()
        logger.warning("Integrity error on %s %s: %s", request.method, request.path, exc.orig)
        return _integrity_response(exc)

    @app.errorhandler(NoResultFound)
    def handle_no_result(exc: NoResultFound):
        return send_error("Record not found", 404)

    @app.errorhandler(HTTPException)
    def handle_http(exc: HTTPException):
        if exc.code == 404:
            return send_error(f"Route {request.method} {request.path} not found", 404)
        return send_error(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        db.session.rollback()
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if current_app.config.get("APP_ENV") == "production":
            return send_error("Internal server error", 500)
        return send_error(str(exc) or exc.__class__.__name__, 500)
