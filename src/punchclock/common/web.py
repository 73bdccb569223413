from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, current_app, g, jsonify, request, session

from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, NotFoundError, ValidationError
from .context import RequestContext

logger = logging.getLogger(__name__)


def current_context() -> RequestContext:
    """Build the caller's context for this request from the stored user row.

    Only the user id lives in the session; the role is read fresh so a
    revoked or demoted account loses access on its next request.
    """
    if "request_context" in g:
        return g.request_context
    if "user_id" not in session:
        raise AuthenticationError("Please log in to continue")

    users = current_app.extensions["punchclock"].users_repo
    user = users.get_by_id(int(session["user_id"]))
    if not user or not user.is_active:
        session.clear()
        raise AuthenticationError("Please log in to continue")

    g.request_context = RequestContext(user_id=user.user_id, role=user.role)
    return g.request_context


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            current_context()
        except AuthenticationError as e:
            return error_response(str(e), 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            ctx = current_context()
        except AuthenticationError as e:
            return error_response(str(e), 401)
        if not ctx.is_admin:
            return error_response("Administrator access required", 403)
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def query_int(name: str, default=None):
    value = request.args.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be a whole number") from None


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    status_by_type = (
        (ValidationError, 400),
        (AuthenticationError, 401),
        (AuthorizationError, 403),
        (NotFoundError, 404),
    )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        for exc_type, status in status_by_type:
            if isinstance(e, exc_type):
                return error_response(str(e), status)
        return error_response(str(e), 400)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # HTTPExceptions (404 route, 405 method) keep their own status.
        code = getattr(e, "code", None)
        if isinstance(code, int) and 400 <= code < 600:
            return error_response(getattr(e, "description", str(e)), code)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return error_response(f"Internal error: {e}", 500)
        return error_response("Internal error", 500)
