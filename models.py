"""Shared SQLAlchemy models and the credential store."""

import re
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import validates
from werkzeug.security import check_password_hash, generate_password_hash

from errors import DuplicateKey
from extensions import db
from permissions import Role

EMAIL_RE = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(db.Model):
    """Represents an account that can authenticate against the API."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # hash only
    role = db.Column(
        db.Enum(Role, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.OPERATOR,
    )
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    assets = db.relationship(
        "Asset",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    @validates("email")
    def _validate_email(self, key, value):
        if not value or not EMAIL_RE.match(value):
            raise ValueError("invalid email address")
        return value

    def set_password(self, plain: str) -> None:
        self.password = generate_password_hash(plain)

    def check_password(self, plain: str) -> bool:
        return bool(plain) and check_password_hash(self.password, plain)

    def to_dict(self, exclude_secret: bool = True) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if not exclude_secret:
            data["password"] = self.password
        return data

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.email}>"


# ---------------------------------------------------------------------------
# Credential store
# ---------------------------------------------------------------------------

def find_user_by_email(email: str | None) -> User | None:
    if not email:
        return None
    return User.query.filter_by(email=email).first()


def find_user_by_id(user_id: int) -> User | None:
    return db.session.get(User, user_id)


def create_user(fields: dict) -> User:
    """
    Persist a new user, hashing the plaintext password first.

    ``name`` falls back to ``username`` for older clients; ``role`` defaults
    to operator.

    Raises:
        DuplicateKey: If the email is already registered.
        ValueError: On a malformed email or unknown role.
    """
    email = fields.get("email")
    if find_user_by_email(email) is not None:
        raise DuplicateKey("User already exists")

    user = User(
        name=fields.get("name") or fields.get("username"),
        email=email,
        role=Role(fields.get("role") or Role.OPERATOR),
    )
    if not fields.get("password"):
        raise ValueError("password is required")
    user.set_password(fields["password"])
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        # Lost the race against a concurrent registration with the same email
        if find_user_by_email(email) is not None:
            raise DuplicateKey("User already exists")
        raise
    return user


def list_users(exclude_secret: bool = True) -> list[dict]:
    return [user.to_dict(exclude_secret=exclude_secret) for user in User.query.order_by(User.id).all()]


def delete_user(user_id: int) -> bool:
    user = find_user_by_id(user_id)
    if user is None:
        return False
    db.session.delete(user)
    db.session.commit()
    return True
