"""Registration, login and the token gate in front of protected routes."""

from models import find_user_by_email
from tokens import verify_token


def _identity(app, token):
    with app.app_context():
        return verify_token(token)


def test_register_then_login(client, app, register) -> None:
    headers, user_id = register("alice@x.com", "pw1")
    assert headers["x-auth-token"]

    resp = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "pw1"})
    assert resp.status_code == 200
    login_token = resp.get_json()["token"]
    assert login_token

    identity = _identity(app, login_token)
    assert identity.id == user_id
    assert identity.role.value == "operator"


def test_register_hashes_password(client, app, register) -> None:
    register("hash@x.com", "plain-secret")
    with app.app_context():
        user = find_user_by_email("hash@x.com")
        assert user.password != "plain-secret"
        assert user.check_password("plain-secret")
        assert not user.check_password("wrong")


def test_register_accepts_username_and_role(client, app) -> None:
    resp = client.post(
        "/api/auth/register",
        json={"username": "Boss", "email": "boss@x.com", "password": "pw", "role": "admin"},
    )
    assert resp.status_code == 200
    assert _identity(app, resp.get_json()["token"]).is_admin
    with app.app_context():
        assert find_user_by_email("boss@x.com").name == "Boss"


def test_register_duplicate_email(client, register) -> None:
    register("dup@x.com")
    resp = client.post(
        "/api/auth/register",
        json={"name": "Again", "email": "dup@x.com", "password": "pw"},
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"msg": "User already exists"}


def test_register_invalid_email_is_server_error(client) -> None:
    resp = client.post(
        "/api/auth/register",
        json={"name": "Bad", "email": "not-an-email", "password": "pw"},
    )
    assert resp.status_code == 500
    assert resp.get_json() == {"msg": "Server error"}


def test_login_wrong_password(client, register) -> None:
    register("bob@x.com", "right")
    resp = client.post("/api/auth/login", json={"email": "bob@x.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.get_json() == {"msg": "Invalid credentials"}


def test_login_unknown_email(client) -> None:
    resp = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "pw"})
    assert resp.status_code == 401


def test_default_admin_seeded(client, app) -> None:
    resp = client.post(
        "/api/auth/login",
        json={"email": "admin@decimetrix.com", "password": "Admin123!"},
    )
    assert resp.status_code == 200
    assert _identity(app, resp.get_json()["token"]).is_admin


def test_missing_token_rejected(client) -> None:
    resp = client.get("/api/assets")
    assert resp.status_code == 401
    assert resp.get_json() == {"msg": "Access denied. Token not provided."}


def test_garbage_token_rejected(client) -> None:
    resp = client.get("/api/assets", headers={"x-auth-token": "not-a-jwt"})
    assert resp.status_code == 401
    assert resp.get_json() == {"msg": "Invalid or expired token."}


def test_unknown_route_is_json(client) -> None:
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "msg" in resp.get_json()
