"""SQLAlchemy model and store operations for tracked assets."""

import enum
from datetime import datetime, timezone

from sqlalchemy.orm import validates

from extensions import db

UPDATABLE_FIELDS = ("name", "type", "latitude", "longitude", "comments")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AssetType(str, enum.Enum):
    WELL = "well"
    MOTOR = "motor"
    TRANSFORMER = "transformer"


class Asset(db.Model):
    """A physical asset located by latitude/longitude and owned by one user."""

    __tablename__ = "assets"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    type = db.Column(
        db.Enum(AssetType, name="asset_type", values_callable=lambda types: [t.value for t in types]),
        nullable=False,
    )
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    comments = db.Column(db.Text)
    owner_id = db.Column(
        "created_by",
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    owner = db.relationship("User", back_populates="assets")

    @validates("name")
    def _validate_name(self, key, value):
        if value is not None and not str(value).strip():
            raise ValueError("asset name must not be empty")
        return value

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "comments": self.comments,
            "createdBy": self.owner_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Asset {self.id}: {self.name} ({self.type.value})>"


def _coerce(field: str, value):
    """Convert a raw JSON value for ``field``; ValueError on a bad enum or number."""
    if value is None:
        return None
    if field == "type":
        return AssetType(value)
    if field in ("latitude", "longitude"):
        return float(value)
    return value


# ---------- store ----------

def create_asset(fields: dict, owner_id: int) -> Asset:
    """Insert an asset owned by ``owner_id``; any owner key in ``fields`` is ignored."""
    asset = Asset(
        owner_id=owner_id,
        **{field: _coerce(field, fields.get(field)) for field in UPDATABLE_FIELDS},
    )
    db.session.add(asset)
    db.session.commit()
    return asset


def find_asset(asset_id: int) -> Asset | None:
    return db.session.get(Asset, asset_id)


def list_assets() -> list[Asset]:
    return Asset.query.order_by(Asset.id).all()


def list_assets_by_owner(owner_id: int) -> list[Asset]:
    return Asset.query.filter_by(owner_id=owner_id).order_by(Asset.id).all()


def update_asset(asset_id: int, partial: dict) -> Asset | None:
    """
    Overwrite every updatable field present in ``partial``.

    Presence is what counts: ``{"comments": ""}`` clears the comments and
    ``{"latitude": 0}`` moves the asset to the equator. Absent fields keep
    their value.
    """
    asset = find_asset(asset_id)
    if asset is None:
        return None
    for field in UPDATABLE_FIELDS:
        if field in partial:
            setattr(asset, field, _coerce(field, partial[field]))
    db.session.commit()
    return asset


def delete_asset(asset_id: int) -> bool:
    asset = find_asset(asset_id)
    if asset is None:
        return False
    db.session.delete(asset)
    db.session.commit()
    return True
