from flask import jsonify, request
from werkzeug.exceptions import HTTPException
from storefront.domain.invariants.exceptions import InvariantViolation


class ApiError(Exception):
    """Base error rendered as a ``{status, message}`` JSON body."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def status(self):
        return "fail" if self.status_code < 500 else "error"


class ValidationError(ApiError):
    status_code = 400


class PermissionDenied(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class RateLimitError(ApiError):
    status_code = 429


class ServiceUnavailable(ApiError):
    status_code = 503


def error_response(message, status_code):
    response = jsonify({
        "status": "fail" if status_code < 500 else "error",
        "message": message,
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            app.logger.error("%s %s failed: %s", request.method, request.path, error.message)
        return error_response(error.message, error.status_code)

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return error_response(str(error), 400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if error.code == 429:
            app.logger.warning("Rate limit exceeded for %s on %s", request.remote_addr, request.path)
            return error_response("Too many requests, please try again later", 429)
        return error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        app.logger.error("Unhandled error on %s %s", request.method, request.path, exc_info=error)
        return error_response("An unexpected error occurred", 500)
