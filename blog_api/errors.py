import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from blog_api.db import db


logger = logging.getLogger(__name__)


class BlogError(Exception):
    """Base class for failures that map onto an HTTP response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ValidationError(BlogError):
    status_code = 400
    default_message = "Invalid input"


class DuplicateUsername(ValidationError):
    default_message = "Username already exists"


class AuthError(BlogError):
    status_code = 401
    default_message = "Authentication failed"


class InvalidCredentials(AuthError):
    status_code = 400
    default_message = "wrong credentials"


class InvalidToken(AuthError):
    default_message = "Invalid token"


class Forbidden(BlogError):
    status_code = 400
    default_message = "You are not the author"


class NotFound(BlogError):
    status_code = 404
    default_message = "Not found"


class UpstreamFailure(BlogError):
    default_message = "Upstream service unavailable"


class UploadFailed(UpstreamFailure):
    default_message = "Cover upload failed"


def register_error_handlers(app):
    @app.errorhandler(BlogError)
    def handle_blog_error(error):
        if error.status_code >= 500:
            logger.error("%s: %s", type(error).__name__, error, exc_info=error)
        return jsonify({"error": str(error)}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        logger.exception("Database error", exc_info=error)
        return jsonify({"error": UpstreamFailure.default_message}), 500
