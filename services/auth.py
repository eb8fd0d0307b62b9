"""Account flows: signup, login, profile and password management."""

from __future__ import annotations

from flask import current_app
from sqlalchemy.exc import IntegrityError

from models import db
from models.user import User
from schemas.auth import (
    LoginRequest,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SignupRequest,
)
from services.tokens import issue_token
from utils.errors import ConflictError, InvalidCredentials, NotFound


def find_by_email(email: str) -> User | None:
    return User.query.filter_by(email=User.normalize_email(email)).first()


def _reload(user: User) -> User:
    fresh = db.session.get(User, user.id, populate_existing=True)
    if fresh is None:
        raise NotFound("User not found")
    return fresh


def signup(data: SignupRequest) -> tuple[str, User]:
    """Create an account and return ``(token, user)``."""

    if find_by_email(data.email) is not None:
        raise ConflictError("User already exists with this email")

    user = User(name=data.name, email=data.email, password=data.password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise ConflictError("User already exists with this email") from exc

    current_app.logger.info("Registered user id=%s", user.id)
    return issue_token(user.id), user


def login(data: LoginRequest) -> tuple[str, User]:
    """Check credentials and return ``(token, user)``.

    Unknown email and wrong password fail with the same message.
    """

    user = find_by_email(data.email)
    if user is None or not user.check_password(data.password):
        current_app.logger.warning("Failed login attempt")
        raise InvalidCredentials("Invalid credentials")

    current_app.logger.info("User id=%s logged in", user.id)
    return issue_token(user.id), user


def get_me(current_user: User) -> User:
    return _reload(current_user)


def update_profile(current_user: User, data: ProfileUpdateRequest) -> User:
    """Apply the provided name/email; absent fields are left untouched."""

    user = _reload(current_user)

    if data.name is not None:
        user.name = data.name

    if data.email is not None:
        taken = User.query.filter(
            User.email == User.normalize_email(data.email),
            User.id != user.id,
        ).first()
        if taken is not None:
            raise ConflictError("Email already in use")
        user.email = data.email

    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise ConflictError("Email already in use") from exc
    return user


def change_password(current_user: User, data: PasswordChangeRequest) -> None:
    user = _reload(current_user)
    if not user.check_password(data.current_password):
        raise InvalidCredentials("Current password is incorrect")

    user.password = data.new_password
    db.session.commit()
    current_app.logger.info("Password changed for user id=%s", user.id)
