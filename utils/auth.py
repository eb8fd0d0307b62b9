"""Request gate: bearer-token authentication for protected views.

Protected views receive the resolved account as an explicit ``current_user``
keyword argument instead of reading it from ambient request state.
"""

from __future__ import annotations

from functools import wraps

from flask import current_app, request

from models import db
from models.user import User
from services.tokens import InvalidToken, verify_token
from utils.errors import Forbidden, Unauthenticated


def _bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme != "Bearer":
        return None
    return token.strip() or None


def authenticate_request() -> User:
    """Resolve the user presenting the request's bearer token."""

    token = _bearer_token()
    if token is None:
        raise Unauthenticated("Not authorized, no token provided")

    try:
        user_id = verify_token(token)
    except InvalidToken as exc:
        current_app.logger.info("Rejected bearer token: %s", exc)
        raise Unauthenticated("Not authorized, token invalid") from exc

    user = db.session.get(User, user_id)
    if user is None:
        raise Unauthenticated("User not found")
    return user


def login_required(view):
    """Require a valid bearer token and pass the user as ``current_user``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        kwargs["current_user"] = authenticate_request()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """Like ``login_required`` but only admits accounts with the admin role."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user = authenticate_request()
        if not user.is_admin:
            raise Forbidden("Access denied. Admin only.")
        kwargs["current_user"] = user
        return view(*args, **kwargs)

    return wrapper
