# permissions.py
"""
RBAC for the API.
- role_required([...]) is the gate decorator for routes (runs after token auth).
- is_allowed(role, allowed) is the pure check behind it.
- can_access_asset(identity, asset): admin, or the caller owns the asset.

Roles:
- operator: manages only the assets they created
- admin: every asset, plus user management
"""

import enum
from functools import wraps
from typing import Iterable

from flask_login import current_user, login_required

from errors import Forbidden


class Role(str, enum.Enum):
    ADMIN = "admin"
    OPERATOR = "operator"


def _normalize(allowed_roles) -> frozenset:
    if isinstance(allowed_roles, (str, Role)):
        allowed_roles = [allowed_roles]
    return frozenset(Role(role) for role in (allowed_roles or []))


def is_allowed(role, allowed_roles: Iterable) -> bool:
    """True if ``role`` is a member of ``allowed_roles``; unknown roles are never allowed."""
    try:
        return Role(role) in _normalize(allowed_roles)
    except ValueError:
        return False


def role_required(allowed_roles: Iterable):
    """
    Decorator restricting a route to the given roles.
    Example:
        @role_required([Role.ADMIN])
        def view(): ...

    Rules:
    - No or invalid token: 401 (via login_required).
    - Role outside the allowed set: 403.
    """
    allowed = _normalize(allowed_roles)

    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def wrapped(*args, **kwargs):
            if not is_allowed(getattr(current_user, "role", None), allowed):
                raise Forbidden("Not authorized.")
            return view_func(*args, **kwargs)

        return wrapped
    return decorator


def can_access_asset(identity, asset) -> bool:
    """Ownership gate for read/update/delete of a single asset."""
    return is_allowed(identity.role, [Role.ADMIN]) or asset.owner_id == identity.id
