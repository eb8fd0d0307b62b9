"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from flask import Request

from utils.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
SQL_INTEGER_MAX = 2**31 - 1


def parse_json_request(req: Request) -> dict:
    """Return the parsed JSON object body or raise a 400 error.

    A request without a body parses as an empty object so that the field
    rules of the operation report what is missing.
    """

    if not req.get_data(cache=True):
        return {}

    if not req.is_json:
        raise ValidationError("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise ValidationError("Request JSON body is malformed.")

    if not isinstance(data, dict):
        raise ValidationError("Request JSON payload must be an object.")

    return data


def clean_string(value: str | None) -> str | None:
    """Trim string input; ``None`` stays ``None``."""

    if value is None:
        return None
    return value.strip()


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value)) and len(value) <= 255


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime into naive UTC.

    Raises ``ValueError`` when the text is not ISO 8601.
    """

    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_positive_int(value: object, message: str) -> int:
    """Return ``value`` as a positive integer or raise ``ValidationError``.

    Only ASCII digits are accepted and the result must fit a SQL INTEGER.
    """

    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(message)
    number = int(text)
    if not 0 < number <= SQL_INTEGER_MAX:
        raise ValidationError(message)
    return number
