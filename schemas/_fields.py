"""Field readers shared by the request types.

Each reader raises ``ValidationError`` with the message of the first rule the
value breaks. Rules are checked in the order the readers are called.
"""

from __future__ import annotations

from datetime import datetime

from utils.errors import ValidationError
from utils.request_validation import clean_string, is_valid_email, parse_iso_datetime


def read_text(
    payload: dict,
    key: str,
    label: str,
    *,
    required: bool = False,
    max_length: int | None = None,
    strip: bool = True,
) -> str | None:
    """Read a string field; absent optional fields come back as ``None``."""

    raw = payload.get(key)
    if raw is not None and not isinstance(raw, str):
        raise ValidationError(f"{label} must be a string")

    value = clean_string(raw) if strip else raw
    if required and not value:
        raise ValidationError(f"{label} is required")
    if value is not None and max_length is not None and len(value) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    return value


def read_email(payload: dict, *, required: bool = True) -> str | None:
    email = read_text(payload, "email", "Email", required=required)
    if email is None:
        return None
    if not is_valid_email(email):
        raise ValidationError("Please enter a valid email")
    return email.lower()


def read_password(
    payload: dict,
    key: str,
    label: str,
    *,
    min_length: int | None = None,
) -> str:
    """Read a password verbatim; passwords are never trimmed."""

    password = read_text(payload, key, label, required=True, strip=False)
    if min_length is not None and len(password) < min_length:
        raise ValidationError(f"{label} must be at least {min_length} characters")
    return password


def read_choice(payload: dict, key: str, choices, message: str) -> str | None:
    if key not in payload:
        return None
    value = payload[key]
    if value not in choices:
        raise ValidationError(message)
    return value


def read_datetime(payload: dict, key: str) -> datetime | None:
    """Read an ISO 8601 date; ``null`` and ``""`` read as no date."""

    value = payload.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError("Invalid date format")
    try:
        return parse_iso_datetime(value)
    except ValueError as exc:
        raise ValidationError("Invalid date format") from exc
