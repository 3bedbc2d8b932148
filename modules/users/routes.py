"""Admin-only user management. Password hashes never leave the server."""

from flask import jsonify
from flask_login import current_user

from errors import NotFound
from extensions import broadcaster
from logger import get_logger
from models import create_user, delete_user, find_user_by_id, list_users
from permissions import Role, role_required
from utils import json_object

from . import bp

logger = get_logger("asset_tracker.users")


@bp.route("", methods=["GET"])
@role_required([Role.ADMIN])
def index():
    return jsonify(list_users(exclude_secret=True))


@bp.route("", methods=["POST"])
@role_required([Role.ADMIN])
def create():
    data = json_object()
    user = create_user(data)
    logger.info("Admin %s created user %s (%s)", current_user.id, user.id, user.role.value)
    return jsonify(user.to_dict(exclude_secret=True))


@bp.route("/<int:user_id>", methods=["DELETE"])
@role_required([Role.ADMIN])
def delete(user_id):
    user = find_user_by_id(user_id)
    if user is None:
        raise NotFound("User not found")

    # owned assets go with the account
    removed_assets = [asset.id for asset in user.assets]
    if not delete_user(user_id):
        raise NotFound("User not found")

    logger.info("Admin %s deleted user %s and %d asset(s)", current_user.id, user_id, len(removed_assets))
    for asset_id in removed_assets:
        broadcaster.asset_deleted(asset_id)
    return jsonify(msg="User removed")
