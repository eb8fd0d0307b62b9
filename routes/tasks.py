"""Tasks blueprint: CRUD over the caller's own tasks."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, request

from models.user import User
from schemas.tasks import TaskCreateRequest, TaskQuery, TaskUpdateRequest
from services import tasks as task_service
from utils.auth import login_required
from utils.request_validation import parse_json_request, parse_positive_int
from utils.responses import success_response

tasks_bp = Blueprint("tasks", __name__)


def _task_id(raw: str) -> int:
    return parse_positive_int(raw, "Invalid task ID")


@tasks_bp.route("", methods=["POST"])
@login_required
def create_task(current_user: User):
    data = TaskCreateRequest.from_payload(parse_json_request(request))
    task = task_service.create_task(current_user, data)
    return success_response(
        HTTPStatus.CREATED, "Task created successfully", task=task.to_dict()
    )


@tasks_bp.route("", methods=["GET"])
@login_required
def list_tasks(current_user: User):
    """Return the caller's tasks with optional status, priority, search and sort."""

    query = TaskQuery.from_args(request.args)
    tasks = task_service.list_tasks(current_user, query)
    return success_response(
        HTTPStatus.OK,
        "Tasks retrieved successfully",
        count=len(tasks),
        tasks=[task.to_dict() for task in tasks],
    )


@tasks_bp.route("/<task_id>", methods=["GET"])
@login_required
def get_task(task_id: str, current_user: User):
    task = task_service.get_task(current_user, _task_id(task_id))
    return success_response(
        HTTPStatus.OK, "Task retrieved successfully", task=task.to_dict()
    )


@tasks_bp.route("/<task_id>", methods=["PUT"])
@login_required
def update_task(task_id: str, current_user: User):
    task_pk = _task_id(task_id)
    data = TaskUpdateRequest.from_payload(parse_json_request(request))
    task = task_service.update_task(current_user, task_pk, data)
    return success_response(
        HTTPStatus.OK, "Task updated successfully", task=task.to_dict()
    )


@tasks_bp.route("/<task_id>", methods=["DELETE"])
@login_required
def delete_task(task_id: str, current_user: User):
    task_service.delete_task(current_user, _task_id(task_id))
    return success_response(HTTPStatus.OK, "Task deleted successfully")
