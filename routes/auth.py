"""Authentication blueprint providing signup, login and password endpoints."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request

from models.user import User
from schemas.auth import LoginRequest, PasswordChangeRequest, SignupRequest
from services import auth as auth_service
from utils.auth import login_required
from utils.request_validation import parse_json_request
from utils.responses import success_response

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/signup", methods=["POST"])
def signup():
    """Register a new user with a name, email and password."""

    data = SignupRequest.from_payload(parse_json_request(request))
    token, user = auth_service.signup(data)
    return success_response(
        HTTPStatus.CREATED,
        "User registered successfully",
        token=token,
        user=user.to_public_dict(),
    )


@auth_bp.route("/login", methods=["POST"])
def login():
    """Authenticate a user and return a bearer token."""

    data = LoginRequest.from_payload(parse_json_request(request))
    token, user = auth_service.login(data)
    return success_response(
        HTTPStatus.OK,
        "Login successful",
        token=token,
        user=user.to_public_dict(),
    )


@auth_bp.route("/password", methods=["PUT"])
@login_required
def change_password(current_user: User):
    data = PasswordChangeRequest.from_payload(parse_json_request(request))
    auth_service.change_password(current_user, data)
    return success_response(HTTPStatus.OK, "Password updated successfully")
