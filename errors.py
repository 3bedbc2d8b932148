"""API error taxonomy and the app-level handlers that turn errors into JSON."""

from flask import jsonify
from werkzeug.exceptions import HTTPException

from extensions import db
from logger import get_logger

logger = get_logger("asset_tracker.errors")


class ApiError(Exception):
    """Base class for errors that map onto a client-visible HTTP status."""

    status_code = 500
    msg = "Server error"

    def __init__(self, msg: str | None = None) -> None:
        super().__init__(msg or self.msg)
        if msg:
            self.msg = msg


class Unauthorized(ApiError):
    status_code = 401
    msg = "Invalid or expired token."


class Forbidden(ApiError):
    status_code = 403
    msg = "Not authorized."


class NotFound(ApiError):
    status_code = 404
    msg = "Not found"


class DuplicateKey(ApiError):
    status_code = 400
    msg = "User already exists"


def register_error_handlers(app) -> None:
    """Install the handler boundary: known errors keep their status, the rest become 500."""

    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(msg=err.msg), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        return jsonify(msg=err.description), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        db.session.rollback()
        logger.error("Unhandled error: %s", err, exc_info=err)
        return jsonify(msg="Server error"), 500
