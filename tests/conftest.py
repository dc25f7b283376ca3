# tests/conftest.py
import os
import sys
from types import SimpleNamespace

import pytest
from werkzeug.security import generate_password_hash

# so that `import app` works when pytest is started from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app  # noqa: E402
from extensions import db  # noqa: E402
from models import Role, User  # noqa: E402
from modules.auth.tokens import issue_token  # noqa: E402

from tests.fakes import TEST_PASSWORD  # noqa: E402


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "APP_ENV": "testing",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
        "JWT_SECRET": "test-jwt-secret",
        "LOG_LEVEL": "WARNING",
    })
    # no app context is held open here: each test-client request must get
    # its own `g` (Flask-Login caches the principal there)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Insert a user straight into the store and hand back id + token + headers."""
    counter = {"n": 0}

    def _make(role: Role = Role.USER, email: str | None = None, name: str = "Test User"):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        with app.app_context():
            user = User(
                email=email.lower(),
                password=generate_password_hash(TEST_PASSWORD),
                name=name,
                role=role,
            )
            db.session.add(user)
            db.session.commit()
            token = issue_token(user)
            return SimpleNamespace(
                id=user.id,
                email=user.email,
                name=user.name,
                role=user.role,
                token=token,
                headers={"Authorization": f"Bearer {token}"},
            )

    return _make


@pytest.fixture()
def alice(make_user):
    return make_user(email="alice@example.com", name="Alice")


@pytest.fixture()
def bob(make_user):
    return make_user(email="bob@example.com", name="Bob")


@pytest.fixture()
def admin(make_user):
    return make_user(role=Role.ADMIN, email="admin@example.com", name="Admin")


@pytest.fixture()
def create_task(client):
    """POST a task as the given user and return its JSON representation."""

    def _create(user, **fields):
        body = {"title": "Task"}
        body.update(fields)
        resp = client.post("/api/v1/tasks", json=body, headers=user.headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]["task"]

    return _create
