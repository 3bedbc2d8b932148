"""First-boot tasks: schema creation and the default admin account."""

import sqlite3

from sqlalchemy import event
from sqlalchemy.engine import Engine

from extensions import db
from logger import get_logger
from models import User, find_user_by_email
from permissions import Role

logger = get_logger("asset_tracker.bootstrap")


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def ensure_schema() -> None:
    # Models must be imported before create_all()
    from modules.assets import models as asset_models  # noqa: F401

    db.create_all()
    logger.info("Database models synchronized")


def ensure_default_admin(app) -> User:
    """Create the seed admin from config unless an account with that email exists."""
    email = app.config["DEFAULT_ADMIN_EMAIL"]
    admin = find_user_by_email(email)
    if admin is not None:
        return admin

    admin = User(name=app.config["DEFAULT_ADMIN_NAME"], email=email, role=Role.ADMIN)
    admin.set_password(app.config["DEFAULT_ADMIN_PASSWORD"])
    db.session.add(admin)
    db.session.commit()
    logger.info("Default admin user created: %s", email)
    return admin


def bootstrap(app) -> None:
    with app.app_context():
        ensure_schema()
        ensure_default_admin(app)
