"""Request types for signup, login and profile operations."""

from __future__ import annotations

from dataclasses import dataclass

from ._fields import read_email, read_password, read_text

NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6


@dataclass(frozen=True)
class SignupRequest:
    name: str
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: dict) -> "SignupRequest":
        name = read_text(payload, "name", "Name", required=True, max_length=NAME_MAX_LENGTH)
        email = read_email(payload)
        password = read_password(
            payload, "password", "Password", min_length=PASSWORD_MIN_LENGTH
        )
        return cls(name=name, email=email, password=password)


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: dict) -> "LoginRequest":
        email = read_email(payload)
        password = read_password(payload, "password", "Password")
        return cls(email=email, password=password)


@dataclass(frozen=True)
class ProfileUpdateRequest:
    """Partial profile update; ``None`` means leave the field alone."""

    name: str | None = None
    email: str | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "ProfileUpdateRequest":
        name = read_text(payload, "name", "Name", max_length=NAME_MAX_LENGTH)
        email = read_email(payload, required=False)
        return cls(name=name or None, email=email)


@dataclass(frozen=True)
class PasswordChangeRequest:
    current_password: str
    new_password: str

    @classmethod
    def from_payload(cls, payload: dict) -> "PasswordChangeRequest":
        current = read_password(payload, "currentPassword", "Current password")
        new = read_password(
            payload, "newPassword", "New password", min_length=PASSWORD_MIN_LENGTH
        )
        return cls(current_password=current, new_password=new)
