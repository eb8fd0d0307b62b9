"""Typed failures raised by request handling and domain logic.

Each class is a Werkzeug ``HTTPException`` so the error boundary registered in
``app.py`` can render it into the JSON envelope with the right status code.
"""

from __future__ import annotations

from werkzeug.exceptions import BadRequest, Forbidden, NotFound, Unauthorized

__all__ = [
    "ValidationError",
    "ConflictError",
    "Unauthenticated",
    "InvalidCredentials",
    "Forbidden",
    "NotFound",
]


class ValidationError(BadRequest):
    """A request body or parameter broke one of its field rules."""


class ConflictError(BadRequest):
    """A unique value (such as an email) is already taken.

    Reported as 400 to keep parity with the existing clients.
    """


class Unauthenticated(Unauthorized):
    """Missing, invalid or expired bearer token, or an unknown token identity."""


class InvalidCredentials(Unauthorized):
    """Wrong login password or wrong current password."""
