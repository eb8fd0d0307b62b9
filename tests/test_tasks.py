"""Tests for task CRUD, filters and ownership enforcement."""

from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from models import db
from models.task import Task


def _auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _create_task(client: FlaskClient, token: str, **fields) -> dict:
    response = client.post("/tasks", json=fields, headers=_auth_headers(token))
    assert response.status_code == 201, response.get_json()
    return response.get_json()["task"]


def test_create_task_applies_defaults_and_owner(client: FlaskClient, ann_token):
    me = client.get("/me", headers=_auth_headers(ann_token)).get_json()["user"]

    response = client.post(
        "/tasks",
        json={"title": "Buy milk", "user": 999},
        headers=_auth_headers(ann_token),
    )

    assert response.status_code == 201
    payload = response.get_json()
    assert payload["message"] == "Task created successfully"
    task = payload["task"]
    assert task["title"] == "Buy milk"
    assert task["status"] == "pending"
    assert task["priority"] == "medium"
    assert task["description"] is None
    assert task["dueDate"] is None
    assert task["user"] == me["id"]
    assert task["createdAt"] and task["updatedAt"]


def test_create_then_get_round_trip(client: FlaskClient, ann_token):
    created = _create_task(
        client,
        ann_token,
        title="  Write report  ",
        description="Quarterly numbers",
        status="in-progress",
        priority="high",
        dueDate="2030-05-01T09:30:00Z",
    )

    response = client.get(f"/tasks/{created['_id']}", headers=_auth_headers(ann_token))

    assert response.status_code == 200
    task = response.get_json()["task"]
    assert task["title"] == "Write report"
    assert task["description"] == "Quarterly numbers"
    assert task["status"] == "in-progress"
    assert task["priority"] == "high"
    assert task["dueDate"] == "2030-05-01T09:30:00"
    assert task["user"] == created["user"]


@pytest.mark.parametrize(
    "payload, message",
    [
        ({}, "Title is required"),
        ({"title": "   "}, "Title is required"),
        ({"title": "t" * 101}, "Title cannot exceed 100 characters"),
        ({"title": "ok", "description": "d" * 501}, "Description cannot exceed 500 characters"),
        ({"title": "ok", "status": "done"}, "Invalid status"),
        ({"title": "ok", "priority": "urgent"}, "Invalid priority"),
        ({"title": "ok", "dueDate": "next tuesday"}, "Invalid date format"),
    ],
)
def test_create_task_validation(client: FlaskClient, ann_token, payload, message):
    response = client.post("/tasks", json=payload, headers=_auth_headers(ann_token))

    assert response.status_code == 400
    assert response.get_json() == {"success": False, "message": message}


def test_task_routes_require_authentication(client: FlaskClient):
    assert client.get("/tasks").status_code == 401
    assert client.post("/tasks", json={"title": "x"}).status_code == 401
    assert client.get("/tasks/1").status_code == 401
    assert client.put("/tasks/1", json={}).status_code == 401
    assert client.delete("/tasks/1").status_code == 401


def test_list_is_scoped_to_owner(client: FlaskClient, ann_token, bob_token):
    _create_task(client, ann_token, title="Ann task")
    _create_task(client, bob_token, title="Bob task", status="completed")

    for query in ("", "?status=completed", "?search=task", "?priority=medium&sort=title"):
        response = client.get(f"/tasks{query}", headers=_auth_headers(ann_token))
        assert response.status_code == 200
        titles = [task["title"] for task in response.get_json()["tasks"]]
        assert "Bob task" not in titles


def test_list_filters_search_and_count(client: FlaskClient, ann_token):
    _create_task(client, ann_token, title="Buy milk", priority="low")
    _create_task(client, ann_token, title="Call plumber", description="Kitchen SINK leaks", status="in-progress")
    _create_task(client, ann_token, title="File taxes", status="completed", priority="high")

    headers = _auth_headers(ann_token)

    payload = client.get("/tasks", headers=headers).get_json()
    assert payload["message"] == "Tasks retrieved successfully"
    assert payload["count"] == 3
    assert [task["title"] for task in payload["tasks"]] == ["File taxes", "Call plumber", "Buy milk"]

    payload = client.get("/tasks?status=completed", headers=headers).get_json()
    assert [task["title"] for task in payload["tasks"]] == ["File taxes"]

    payload = client.get("/tasks?priority=low", headers=headers).get_json()
    assert [task["title"] for task in payload["tasks"]] == ["Buy milk"]

    payload = client.get("/tasks?search=sink", headers=headers).get_json()
    assert [task["title"] for task in payload["tasks"]] == ["Call plumber"]

    payload = client.get("/tasks?search=MILK", headers=headers).get_json()
    assert payload["count"] == 1

    payload = client.get("/tasks?search=100%25", headers=headers).get_json()
    assert payload["count"] == 0


def test_list_ignores_unknown_filter_values(client: FlaskClient, ann_token):
    _create_task(client, ann_token, title="One")
    _create_task(client, ann_token, title="Two", status="completed")

    response = client.get(
        "/tasks?status=archived&priority=urgent", headers=_auth_headers(ann_token)
    )

    assert response.status_code == 200
    assert response.get_json()["count"] == 2


def test_list_sort_options(client: FlaskClient, ann_token):
    _create_task(client, ann_token, title="banana")
    _create_task(client, ann_token, title="apple")
    _create_task(client, ann_token, title="cherry")
    headers = _auth_headers(ann_token)

    titles = lambda query: [  # noqa: E731
        task["title"] for task in client.get(f"/tasks{query}", headers=headers).get_json()["tasks"]
    ]

    assert titles("?sort=title") == ["apple", "banana", "cherry"]
    assert titles("?sort=-title") == ["cherry", "banana", "apple"]
    assert titles("?sort=createdAt") == ["banana", "apple", "cherry"]
    assert titles("?sort=bogus") == ["cherry", "apple", "banana"]


def test_update_overwrites_only_provided_fields(client: FlaskClient, ann_token):
    created = _create_task(
        client,
        ann_token,
        title="Draft",
        description="first pass",
        priority="high",
        dueDate="2030-01-01",
    )

    response = client.put(
        f"/tasks/{created['_id']}",
        json={"status": "completed"},
        headers=_auth_headers(ann_token),
    )

    assert response.status_code == 200
    assert response.get_json()["message"] == "Task updated successfully"
    task = response.get_json()["task"]
    assert task["status"] == "completed"
    assert task["title"] == "Draft"
    assert task["description"] == "first pass"
    assert task["priority"] == "high"
    assert task["dueDate"] == "2030-01-01T00:00:00"


def test_update_explicit_empty_values_overwrite(client: FlaskClient, ann_token):
    created = _create_task(
        client, ann_token, title="Draft", description="notes", dueDate="2030-01-01"
    )

    response = client.put(
        f"/tasks/{created['_id']}",
        json={"description": "", "dueDate": None},
        headers=_auth_headers(ann_token),
    )

    task = response.get_json()["task"]
    assert task["description"] == ""
    assert task["dueDate"] is None
    assert task["title"] == "Draft"


def test_update_with_empty_body_changes_nothing(client: FlaskClient, ann_token):
    created = _create_task(client, ann_token, title="Stable", description="as is")

    response = client.put(
        f"/tasks/{created['_id']}", json={}, headers=_auth_headers(ann_token)
    )

    assert response.status_code == 200
    assert response.get_json()["task"] == created


def test_update_cannot_reassign_owner(client: FlaskClient, ann_token, bob_token):
    created = _create_task(client, ann_token, title="Mine")
    bob = client.get("/me", headers=_auth_headers(bob_token)).get_json()["user"]

    response = client.put(
        f"/tasks/{created['_id']}",
        json={"user": bob["id"], "_id": 12345, "title": "Still mine"},
        headers=_auth_headers(ann_token),
    )

    task = response.get_json()["task"]
    assert task["user"] == created["user"]
    assert task["_id"] == created["_id"]
    assert task["title"] == "Still mine"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"title": ""}, "Title cannot be empty"),
        ({"title": None}, "Title cannot be empty"),
        ({"status": None}, "Invalid status"),
        ({"priority": "critical"}, "Invalid priority"),
        ({"dueDate": "31/12/2030"}, "Invalid date format"),
    ],
)
def test_update_validation(client: FlaskClient, ann_token, payload, message):
    created = _create_task(client, ann_token, title="Draft")

    response = client.put(
        f"/tasks/{created['_id']}", json=payload, headers=_auth_headers(ann_token)
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == message


def test_status_transitions_are_free_form(client: FlaskClient, ann_token):
    created = _create_task(client, ann_token, title="Loop", status="completed")
    headers = _auth_headers(ann_token)

    for status in ("pending", "completed", "in-progress", "pending"):
        response = client.put(f"/tasks/{created['_id']}", json={"status": status}, headers=headers)
        assert response.get_json()["task"]["status"] == status


def test_delete_task(client: FlaskClient, app, ann_token):
    created = _create_task(client, ann_token, title="Temporary")

    response = client.delete(f"/tasks/{created['_id']}", headers=_auth_headers(ann_token))

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "message": "Task deleted successfully"}
    with app.app_context():
        assert db.session.get(Task, created["_id"]) is None

    response = client.get(f"/tasks/{created['_id']}", headers=_auth_headers(ann_token))
    assert response.status_code == 404
    assert response.get_json()["message"] == "Task not found"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_missing_task_returns_not_found(client: FlaskClient, ann_token, method):
    response = getattr(client, method)("/tasks/9999", headers=_auth_headers(ann_token))

    assert response.status_code == 404
    assert response.get_json() == {"success": False, "message": "Task not found"}


@pytest.mark.parametrize(
    "task_id", ["abc", "0", "-3", "²", "١٢", "99999999999999999999999", "2147483648"]
)
def test_malformed_task_id_is_rejected(client: FlaskClient, ann_token, task_id):
    response = client.get(f"/tasks/{task_id}", headers=_auth_headers(ann_token))

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid task ID"


@pytest.mark.parametrize(
    "method, kwargs, message",
    [
        ("get", {}, "Not authorized to access this task"),
        ("put", {"json": {"title": "hijacked", "status": "completed"}}, "Not authorized to update this task"),
        ("delete", {}, "Not authorized to delete this task"),
    ],
)
def test_other_users_cannot_touch_task(client: FlaskClient, app, ann_token, bob_token, method, kwargs, message):
    created = _create_task(client, ann_token, title="Private", description="ann only")

    response = getattr(client, method)(
        f"/tasks/{created['_id']}", headers=_auth_headers(bob_token), **kwargs
    )

    assert response.status_code == 403
    assert response.get_json() == {"success": False, "message": message}

    with app.app_context():
        task = db.session.get(Task, created["_id"])
        assert task is not None
        assert task.title == "Private"
        assert task.status == "pending"


def test_end_to_end_scenario(client: FlaskClient):
    signup = client.post(
        "/auth/signup",
        json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
    )
    assert signup.status_code == 201
    assert signup.get_json()["token"]

    wrong = client.post("/auth/login", json={"email": "ann@x.com", "password": "wrong"})
    assert wrong.status_code == 401
    assert wrong.get_json()["message"] == "Invalid credentials"

    login = client.post("/auth/login", json={"email": "ann@x.com", "password": "secret1"})
    assert login.status_code == 200
    token = login.get_json()["token"]

    created = client.post("/tasks", json={"title": "Buy milk"}, headers=_auth_headers(token))
    assert created.status_code == 201
    task = created.get_json()["task"]
    assert task["status"] == "pending"
    assert task["priority"] == "medium"

    other = client.post(
        "/auth/signup",
        json={"name": "Eve", "email": "eve@x.com", "password": "secret9"},
    ).get_json()["token"]
    denied = client.delete(f"/tasks/{task['_id']}", headers=_auth_headers(other))
    assert denied.status_code == 403
