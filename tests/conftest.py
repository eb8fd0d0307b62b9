"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402


class _TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_PREFIX = ""
    RATELIMIT_ENABLED = False
    CORS_ORIGINS = "*"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_TestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def ann_token(client: FlaskClient) -> str:
    response = client.post(
        "/auth/signup",
        json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
    )
    assert response.status_code == 201
    return response.get_json()["token"]


@pytest.fixture()
def bob_token(client: FlaskClient) -> str:
    response = client.post(
        "/auth/signup",
        json={"name": "Bob", "email": "bob@x.com", "password": "secret1"},
    )
    assert response.status_code == 201
    return response.get_json()["token"]
