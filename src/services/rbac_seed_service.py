# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Seeding of the permission catalog and preset positions."""

import logging
import uuid

from sqlalchemy.orm import Session

from src.models import Permission, Position, PositionPermission
from src.rbac.permissions import PERMISSION_DEFINITIONS
from src.rbac.positions import PRESET_POSITIONS

logger = logging.getLogger(__name__)


def seed_permission_catalog(db: Session) -> int:
    """Insert catalog rows that are missing from the permissions table.

    This function is idempotent.
    @param db: SQLAlchemy Session object
    @return: number of rows created
    """
    existing = {code for (code,) in db.query(Permission.code).all()}

    created = 0
    for perm_data in PERMISSION_DEFINITIONS:
        code = perm_data["code"].value
        if code in existing:
            continue
        db.add(
            Permission(
                code=code,
                name=perm_data["name"],
                category=perm_data["category"],
                description=perm_data["description"],
            )
        )
        created += 1

    db.commit()
    if created:
        logger.info(f"Seeded {created} permissions")
    return created


def create_preset_positions(db: Session, restaurant_id: uuid.UUID) -> list[uuid.UUID]:
    """Create the preset positions, with their permissions, for a restaurant.

    Codes missing from the permissions table are skipped. The caller commits.
    """
    code_to_id = {code: pid for (code, pid) in db.query(Permission.code, Permission.id)}

    position_ids: list[uuid.UUID] = []
    for name, codes in PRESET_POSITIONS.items():
        position = Position(restaurant_id=restaurant_id, name=name, is_active=True)
        db.add(position)
        db.flush()  # Flush to get the position ID

        granted = 0
        for code in codes:
            permission_id = code_to_id.get(code.value)
            if permission_id is None:
                logger.warning(f"Permission code not found in database: {code.value}")
                continue
            db.add(PositionPermission(position_id=position.id, permission_id=permission_id))
            granted += 1

        position_ids.append(position.id)
        logger.debug(f"Created preset position {name} with {granted} permissions")

    logger.info(f"Created {len(position_ids)} preset positions for restaurant {restaurant_id}")
    return position_ids
