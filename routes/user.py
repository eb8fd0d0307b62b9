"""Profile blueprint for the authenticated user."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request

from models.user import User
from schemas.auth import ProfileUpdateRequest
from services import auth as auth_service
from utils.auth import login_required
from utils.request_validation import parse_json_request
from utils.responses import success_response

user_bp = Blueprint("user", __name__)


@user_bp.route("", methods=["GET"])
@login_required
def get_me(current_user: User):
    """Return the caller's profile including the signup date."""

    user = auth_service.get_me(current_user)
    return success_response(
        HTTPStatus.OK,
        "Profile retrieved successfully",
        user=user.to_public_dict(include_created=True),
    )


@user_bp.route("", methods=["PUT"])
@login_required
def update_profile(current_user: User):
    data = ProfileUpdateRequest.from_payload(parse_json_request(request))
    user = auth_service.update_profile(current_user, data)
    return success_response(
        HTTPStatus.OK,
        "Profile updated successfully",
        user=user.to_public_dict(),
    )
