"""HTTP routes for assets. Every mutation is broadcast to real-time clients."""

from flask import jsonify
from flask_login import current_user, login_required

from errors import Forbidden, NotFound
from extensions import broadcaster
from logger import get_logger
from modules.assets.models import (
    Asset,
    create_asset,
    delete_asset,
    find_asset,
    list_assets,
    list_assets_by_owner,
    update_asset,
)
from permissions import Role, can_access_asset, is_allowed
from utils import json_object

from . import bp

logger = get_logger("asset_tracker.assets")


def _get_owned_asset(asset_id: int, action: str) -> Asset:
    asset = find_asset(asset_id)
    if asset is None:
        raise NotFound("Asset not found")
    if not can_access_asset(current_user, asset):
        logger.warning("User %s denied %s on asset %s", current_user.id, action, asset_id)
        raise Forbidden(f"Not authorized to {action} this asset")
    return asset


@bp.route("", methods=["GET"])
@login_required
def index():
    if is_allowed(current_user.role, [Role.ADMIN]):
        assets = list_assets()
    else:
        assets = list_assets_by_owner(current_user.id)
    return jsonify([asset.to_dict() for asset in assets])


@bp.route("", methods=["POST"])
@login_required
def create():
    data = json_object()
    asset = create_asset(data, owner_id=current_user.id)
    payload = asset.to_dict()
    logger.info("User %s created asset %s", current_user.id, asset.id)
    broadcaster.asset_created(payload)
    return jsonify(payload)


@bp.route("/<int:asset_id>", methods=["GET"])
@login_required
def view(asset_id):
    asset = _get_owned_asset(asset_id, "view")
    return jsonify(asset.to_dict())


@bp.route("/<int:asset_id>", methods=["PUT"])
@login_required
def edit(asset_id):
    _get_owned_asset(asset_id, "update")
    data = json_object()
    asset = update_asset(asset_id, data)
    if asset is None:
        # removed between the ownership check and the write
        raise NotFound("Asset not found")
    payload = asset.to_dict()
    logger.info("User %s updated asset %s", current_user.id, asset_id)
    broadcaster.asset_updated(payload)
    return jsonify(payload)


@bp.route("/<int:asset_id>", methods=["DELETE"])
@login_required
def delete(asset_id):
    _get_owned_asset(asset_id, "delete")
    if not delete_asset(asset_id):
        raise NotFound("Asset not found")
    logger.info("User %s deleted asset %s", current_user.id, asset_id)
    broadcaster.asset_deleted(asset_id)
    return jsonify(msg="Asset removed")
