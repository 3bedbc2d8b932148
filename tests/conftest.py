# tests/conftest.py
import os
import sys
import pytest

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from config import Config
from extensions import db, socketio
from tokens import verify_token


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "test-secret"
    JWT_SECRET = "test-jwt-secret"
    DEFAULT_ADMIN_EMAIL = "admin@decimetrix.com"
    DEFAULT_ADMIN_PASSWORD = "Admin123!"
    LOG_LEVEL = "WARNING"


@pytest.fixture()
def app():
    # No app context is held open here: requests must not share `g`
    # (Flask-Login caches current_user there).
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def socket_client(app):
    sio = socketio.test_client(app)
    yield sio
    if sio.is_connected():
        sio.disconnect()


@pytest.fixture()
def register(client, app):
    """Register an account through the API; returns ``(headers, user_id)``."""

    def _register(email: str, password: str = "pw1", role: str | None = None, name: str = "Test User"):
        body = {"name": name, "email": email, "password": password}
        if role:
            body["role"] = role
        resp = client.post("/api/auth/register", json=body)
        assert resp.status_code == 200, resp.get_json()
        token = resp.get_json()["token"]
        with app.app_context():
            user_id = verify_token(token).id
        return {"x-auth-token": token}, user_id

    return _register


@pytest.fixture()
def admin_headers(client):
    resp = client.post(
        "/api/auth/login",
        json={"email": TestConfig.DEFAULT_ADMIN_EMAIL, "password": TestConfig.DEFAULT_ADMIN_PASSWORD},
    )
    assert resp.status_code == 200
    return {"x-auth-token": resp.get_json()["token"]}


@pytest.fixture()
def well():
    return {"name": "Well-1", "type": "well", "latitude": 10, "longitude": 20}
