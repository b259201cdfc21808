# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database access for the permission engine and position permissions."""

import logging
import uuid

from sqlalchemy.orm import Session

from src.database import store_read
from src.exceptions import NotFoundError
from src.models import (
    Permission,
    Position,
    PositionPermission,
    Restaurant,
    RestaurantMembership,
    Role,
    User,
)
from src.rbac.engine import EntityId, PermissionEngine, PolicyDataProvider
from src.rbac.permissions import PermissionCode, parse_permission_code

logger = logging.getLogger(__name__)


def _as_uuid(value: EntityId | None) -> uuid.UUID | None:
    """Coerce an identifier to a UUID; malformed ids match nothing."""
    if value is None or isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class SqlPolicyDataProvider(PolicyDataProvider):
    """PolicyDataProvider backed by the application database."""

    def __init__(self, db: Session):
        self.db = db

    @store_read
    def get_user_role(self, user_id: EntityId) -> Role | None:
        user_uuid = _as_uuid(user_id)
        if user_uuid is None:
            return None
        return self.db.query(User.role).filter(User.id == user_uuid).scalar()

    @store_read
    def get_restaurant_manager_id(self, restaurant_id: EntityId) -> uuid.UUID | None:
        restaurant_uuid = _as_uuid(restaurant_id)
        if restaurant_uuid is None:
            return None
        return (
            self.db.query(Restaurant.manager_id)
            .filter(Restaurant.id == restaurant_uuid)
            .scalar()
        )

    @store_read
    def is_restaurant_member(self, user_id: EntityId, restaurant_id: EntityId) -> bool:
        user_uuid = _as_uuid(user_id)
        restaurant_uuid = _as_uuid(restaurant_id)
        if user_uuid is None or restaurant_uuid is None:
            return False
        membership = (
            self.db.query(RestaurantMembership.id)
            .filter(
                RestaurantMembership.user_id == user_uuid,
                RestaurantMembership.restaurant_id == restaurant_uuid,
                RestaurantMembership.is_active.is_(True),
            )
            .first()
        )
        return membership is not None

    @store_read
    def get_user_position_permissions(
        self, user_id: EntityId, restaurant_id: EntityId
    ) -> set[PermissionCode]:
        user_uuid = _as_uuid(user_id)
        restaurant_uuid = _as_uuid(restaurant_id)
        if user_uuid is None or restaurant_uuid is None:
            return set()

        rows = (
            self.db.query(Permission.code)
            .join(PositionPermission, PositionPermission.permission_id == Permission.id)
            .join(Position, Position.id == PositionPermission.position_id)
            .join(
                RestaurantMembership,
                RestaurantMembership.position_id == Position.id,
            )
            .filter(
                RestaurantMembership.user_id == user_uuid,
                RestaurantMembership.restaurant_id == restaurant_uuid,
                RestaurantMembership.is_active.is_(True),
                Position.is_active.is_(True),
            )
            .all()
        )

        codes: set[PermissionCode] = set()
        for (raw_code,) in rows:
            code = parse_permission_code(raw_code)
            if code is None:
                logger.warning(f"Ignoring unknown permission code in store: {raw_code}")
                continue
            codes.add(code)
        return codes


def get_permission_engine(db: Session) -> PermissionEngine:
    """Build a permission engine reading from the given session."""
    return PermissionEngine(SqlPolicyDataProvider(db))


def list_permissions(db: Session) -> list[Permission]:
    """List the permission catalog ordered by category and name."""
    return db.query(Permission).order_by(Permission.category, Permission.name).all()


def group_permissions_by_category(
    permissions: list[Permission],
) -> dict[str, list[Permission]]:
    """Group catalog rows by their category, keeping their order."""
    grouped: dict[str, list[Permission]] = {}
    for permission in permissions:
        grouped.setdefault(permission.category, []).append(permission)
    return grouped


def get_position(db: Session, position_id: uuid.UUID) -> Position:
    """Get a position by ID or raise NotFoundError."""
    position = db.query(Position).filter(Position.id == position_id).first()
    if not position:
        raise NotFoundError("Position", position_id)
    return position


def get_position_permissions(db: Session, position_id: uuid.UUID) -> list[Permission]:
    """Get the catalog rows assigned to a position."""
    return (
        db.query(Permission)
        .join(PositionPermission, PositionPermission.permission_id == Permission.id)
        .filter(PositionPermission.position_id == position_id)
        .order_by(Permission.category, Permission.name)
        .all()
    )


def set_position_permissions(
    db: Session, position_id: uuid.UUID, permission_ids: list[uuid.UUID]
) -> list[Permission]:
    """Replace the permissions of a position.

    Nothing is written unless every permission id exists.
    """
    get_position(db, position_id)

    unique_ids = list(dict.fromkeys(permission_ids))
    permissions = []
    if unique_ids:
        permissions = db.query(Permission).filter(Permission.id.in_(unique_ids)).all()

    found_ids = {p.id for p in permissions}
    missing = [pid for pid in unique_ids if pid not in found_ids]
    if missing:
        raise NotFoundError("Permission", ", ".join(str(pid) for pid in missing))

    db.query(PositionPermission).filter(
        PositionPermission.position_id == position_id
    ).delete()
    db.flush()

    for permission in permissions:
        db.add(PositionPermission(position_id=position_id, permission_id=permission.id))

    db.commit()
    logger.info(
        f"Updated permissions for position {position_id}: "
        f"{sorted(p.code for p in permissions)}"
    )
    return sorted(permissions, key=lambda p: (p.category, p.name))
