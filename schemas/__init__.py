"""Request types parsed and validated at the HTTP boundary."""

from .auth import LoginRequest, PasswordChangeRequest, ProfileUpdateRequest, SignupRequest
from .tasks import TaskCreateRequest, TaskQuery, TaskUpdateRequest

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "PasswordChangeRequest",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskQuery",
]
