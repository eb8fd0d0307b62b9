"""Issue and verify signed, time-limited identity tokens."""

from __future__ import annotations

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError


class InvalidToken(Exception):
    """The token failed signature, expiry or shape checks."""


def issue_token(user_id: int) -> str:
    """Return an access token whose subject is ``user_id``.

    Expiry comes from ``JWT_ACCESS_TOKEN_EXPIRES``.
    """

    return create_access_token(identity=str(user_id))


def verify_token(token: str) -> int:
    """Return the user id carried by ``token`` or raise ``InvalidToken``."""

    try:
        claims = decode_token(token)
    except (PyJWTError, JWTExtendedException) as exc:
        raise InvalidToken(str(exc)) from exc

    if claims.get("type") != "access":
        raise InvalidToken("Only access tokens are accepted.")

    subject = claims.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise InvalidToken("Token subject is not a user id.") from exc
