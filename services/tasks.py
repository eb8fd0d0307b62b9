"""Task flows scoped to the authenticated owner."""

from __future__ import annotations

from flask import current_app
from sqlalchemy import or_

from models import db
from models.task import Task
from models.user import User
from schemas.tasks import DEFAULT_SORT, TaskCreateRequest, TaskQuery, TaskUpdateRequest
from utils.errors import Forbidden, NotFound

SORT_FIELDS = {
    "createdAt": Task.created_at,
    "updatedAt": Task.updated_at,
    "dueDate": Task.due_date,
    "title": Task.title,
    "status": Task.status,
    "priority": Task.priority,
}

UPDATABLE_FIELDS = ("title", "description", "status", "priority", "due_date")


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def parse_sort(sort: str) -> list:
    """Turn ``"-createdAt,title"`` style sort text into ORDER BY clauses.

    A leading ``-`` sorts descending and ``+`` ascending; unknown fields are
    skipped. The id breaks ties in the direction of the last usable field.
    """

    clauses = []
    descending = True
    for token in sort.replace(",", " ").split():
        column = SORT_FIELDS.get(token.lstrip("+-"))
        if column is None:
            continue
        descending = token.startswith("-")
        clauses.append(column.desc() if descending else column.asc())

    if not clauses:
        return parse_sort(DEFAULT_SORT)
    clauses.append(Task.id.desc() if descending else Task.id.asc())
    return clauses


def _get_owned_task(owner: User, task_id: int, action: str) -> Task:
    task = db.session.get(Task, task_id)
    if task is None:
        raise NotFound("Task not found")
    if not task.is_owned_by(owner):
        current_app.logger.warning(
            "User id=%s denied %s on task id=%s", owner.id, action, task_id
        )
        raise Forbidden(f"Not authorized to {action} this task")
    return task


def create_task(owner: User, data: TaskCreateRequest) -> Task:
    task = Task(
        title=data.title,
        description=data.description,
        due_date=data.due_date,
        user_id=owner.id,
    )
    if data.status is not None:
        task.status = data.status
    if data.priority is not None:
        task.priority = data.priority

    db.session.add(task)
    db.session.commit()
    return task


def list_tasks(owner: User, query: TaskQuery) -> list[Task]:
    """Return the owner's tasks matching the filters, in the requested order."""

    statement = Task.query.filter(Task.user_id == owner.id)

    if query.status:
        statement = statement.filter(Task.status == query.status)
    if query.priority:
        statement = statement.filter(Task.priority == query.priority)

    if query.search:
        like = f"%{_escape_like(query.search.lower())}%"
        statement = statement.filter(
            or_(
                db.func.lower(Task.title).like(like, escape="\\"),
                db.func.lower(Task.description).like(like, escape="\\"),
            )
        )

    return statement.order_by(*parse_sort(query.sort)).all()


def get_task(owner: User, task_id: int) -> Task:
    return _get_owned_task(owner, task_id, "access")


def update_task(owner: User, task_id: int, data: TaskUpdateRequest) -> Task:
    """Overwrite only the fields present in ``data``; owner and id never change."""

    task = _get_owned_task(owner, task_id, "update")
    for name in UPDATABLE_FIELDS:
        if name in data.changes:
            setattr(task, name, data.changes[name])
    db.session.commit()
    return task


def delete_task(owner: User, task_id: int) -> None:
    task = _get_owned_task(owner, task_id, "delete")
    db.session.delete(task)
    db.session.commit()
