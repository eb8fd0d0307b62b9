"""Uniform JSON envelope for every API response."""

from __future__ import annotations

from http import HTTPStatus

from flask import Response, jsonify


def success_response(
    status: int | HTTPStatus = HTTPStatus.OK,
    message: str = "Success",
    **data,
) -> tuple[Response, int]:
    """Return ``{"success": true, "message": ..., **data}`` with ``status``."""

    payload = {"success": True, "message": message}
    payload.update(data)
    return jsonify(payload), int(status)


def error_payload(message: str) -> dict:
    return {"success": False, "message": message}
