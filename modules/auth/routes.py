"""Public registration and login endpoints; both answer with a bearer token."""

from flask import jsonify

from errors import Unauthorized
from logger import get_logger
from models import create_user, find_user_by_email
from tokens import issue_token
from utils import json_object

from . import bp

logger = get_logger("asset_tracker.auth")


@bp.route("/register", methods=["POST"])
def register():
    data = json_object()
    user = create_user(data)
    logger.info("Registered user %s (%s)", user.email, user.role.value)
    return jsonify(token=issue_token(user.id, user.role))


@bp.route("/login", methods=["POST"])
def login():
    data = json_object()
    email = data.get("email")
    logger.debug("Login attempt for %s", email)

    user = find_user_by_email(email)
    if user is None or not user.check_password(data.get("password") or ""):
        logger.warning("Failed login for %s", email)
        raise Unauthorized("Invalid credentials")

    logger.info("Successful login for %s", user.email)
    return jsonify(token=issue_token(user.id, user.role))
