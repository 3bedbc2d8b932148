"""Bearer token issue/verify and the Flask-Login hooks that enforce it.

Tokens are HS256 JWTs carried in the ``x-auth-token`` header. Expiry is the
only invalidation mechanism; there is no refresh flow or revocation list.
"""

from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app, jsonify, request
from flask_login import UserMixin

from extensions import login_manager
from logger import get_logger
from errors import Unauthorized
from permissions import Role

logger = get_logger("asset_tracker.tokens")

TOKEN_HEADER = "x-auth-token"
ALGORITHM = "HS256"


class TokenIdentity(UserMixin):
    """Caller identity decoded from a verified token; becomes ``current_user``."""

    def __init__(self, user_id: int, role: Role) -> None:
        self.id = user_id
        self.role = role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<TokenIdentity {self.id} ({self.role.value})>"


def issue_token(user_id: int, role, expires_in: timedelta | None = None) -> str:
    """Sign a token binding ``user_id`` and ``role``, valid for TOKEN_EXPIRES_HOURS by default."""

    if expires_in is None:
        expires_in = timedelta(hours=current_app.config["TOKEN_EXPIRES_HOURS"])
    now = datetime.now(timezone.utc)
    payload = {
        "user": {"id": user_id, "role": Role(role).value},
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=ALGORITHM)


def verify_token(token: str) -> TokenIdentity:
    """
    Decode and validate a token.

    Raises:
        Unauthorized: If the signature is wrong, the token expired, or the
            payload does not carry a user id and a known role.
    """
    try:
        payload = jwt.decode(token, current_app.config["JWT_SECRET"], algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.debug("Token expired")
        raise Unauthorized("Invalid or expired token.")
    except jwt.InvalidTokenError as exc:
        logger.debug("Token rejected: %s", exc)
        raise Unauthorized("Invalid or expired token.")

    user = payload.get("user") or {}
    try:
        return TokenIdentity(int(user["id"]), Role(user["role"]))
    except (KeyError, TypeError, ValueError):
        raise Unauthorized("Invalid or expired token.")


@login_manager.request_loader
def load_identity_from_request(req) -> TokenIdentity | None:
    """Resolve ``current_user`` from the token header; ``None`` leaves the caller anonymous."""

    token = req.headers.get(TOKEN_HEADER)
    if not token:
        return None
    try:
        return verify_token(token)
    except Unauthorized:
        logger.warning("Rejected token on %s %s", req.method, req.path)
        return None


@login_manager.unauthorized_handler
def unauthorized():
    if not request.headers.get(TOKEN_HEADER):
        return jsonify(msg="Access denied. Token not provided."), 401
    return jsonify(msg="Invalid or expired token."), 401
