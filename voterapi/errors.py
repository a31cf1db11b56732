from flask import current_app, jsonify, g, request
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES


def _payload(code: str, message: str, details=None, status=400):
    return (
        jsonify({
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or None,
            },
            "request_id": getattr(g, "request_id", None),
        }),
        status,
    )


def error_response(status: int, message: str | None = None, details=None):
    """Render the error envelope for a status code, e.g. for store failures."""
    name = HTTP_STATUS_CODES.get(status, "Unknown Error")
    return _payload(
        code=name.replace(" ", "_").upper(),
        message=message or name,
        details=details,
        status=status,
    )


def register_error_handlers(app):
    # Generic HTTP errors (400, 404, 405, ...)
    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        desc = e.description

        # Structured error info via abort(description=dict) or our BadRequest subclasses
        if isinstance(desc, dict):
            code = desc.get("code") or e.name.replace(" ", "_").upper()
            message = desc.get("message") or e.name
            details = desc.get("errors") or desc.get("details")
            return _payload(code=code, message=message, details=details, status=e.code or 400)

        return _payload(
            code=e.name.replace(" ", "_").upper(),
            message=desc or e.name,
            details=None,
            status=e.code or 400
        )

    # Recovery: anything unhandled becomes a 500 and the server keeps running
    @app.errorhandler(Exception)
    def handle_exception(e):
        current_app.logger.exception(
            "Unhandled exception request_id=%s path=%s", getattr(g, "request_id", None), request.path
        )
        # Don't leak internals
        return _payload("INTERNAL_SERVER_ERROR", "An unexpected error occurred", status=500)
