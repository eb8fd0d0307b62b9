"""Request types for task operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from models.task import TASK_PRIORITIES, TASK_STATUSES
from utils.errors import ValidationError

from ._fields import read_choice, read_datetime, read_text

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
DEFAULT_SORT = "-createdAt"


@dataclass(frozen=True)
class TaskCreateRequest:
    title: str
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: datetime | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "TaskCreateRequest":
        title = read_text(
            payload, "title", "Title", required=True, max_length=TITLE_MAX_LENGTH
        )
        description = read_text(
            payload, "description", "Description", max_length=DESCRIPTION_MAX_LENGTH
        )
        status = read_choice(payload, "status", TASK_STATUSES, "Invalid status")
        priority = read_choice(payload, "priority", TASK_PRIORITIES, "Invalid priority")
        due_date = read_datetime(payload, "dueDate")
        return cls(
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=due_date,
        )


@dataclass(frozen=True)
class TaskUpdateRequest:
    """Holds only the fields present in the request body.

    ``changes`` maps model attribute names to their new values. A key that
    was absent from the body is absent here; an explicit ``null`` or empty
    string is kept and overwrites the stored value.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict) -> "TaskUpdateRequest":
        changes: dict[str, Any] = {}

        if "title" in payload:
            title = read_text(payload, "title", "Title", max_length=TITLE_MAX_LENGTH)
            if not title:
                raise ValidationError("Title cannot be empty")
            changes["title"] = title

        if "description" in payload:
            changes["description"] = read_text(
                payload, "description", "Description", max_length=DESCRIPTION_MAX_LENGTH
            )

        if "status" in payload:
            changes["status"] = read_choice(
                payload, "status", TASK_STATUSES, "Invalid status"
            )

        if "priority" in payload:
            changes["priority"] = read_choice(
                payload, "priority", TASK_PRIORITIES, "Invalid priority"
            )

        if "dueDate" in payload:
            changes["due_date"] = read_datetime(payload, "dueDate")

        return cls(changes=changes)


@dataclass(frozen=True)
class TaskQuery:
    """List filters; unrecognized status/priority values are dropped."""

    status: str | None = None
    priority: str | None = None
    search: str | None = None
    sort: str = DEFAULT_SORT

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "TaskQuery":
        status = args.get("status")
        priority = args.get("priority")
        search = (args.get("search") or "").strip()
        return cls(
            status=status if status in TASK_STATUSES else None,
            priority=priority if priority in TASK_PRIORITIES else None,
            search=search or None,
            sort=(args.get("sort") or "").strip() or DEFAULT_SORT,
        )
