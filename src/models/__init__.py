# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.base import Base, TimestampMixin
from src.models.enums import BYPASS_ROLES, Role
from src.models.permission import Permission
from src.models.position import Position
from src.models.position_permission import PositionPermission
from src.models.restaurant import Restaurant
from src.models.restaurant_membership import RestaurantMembership
from src.models.session import Session
from src.models.user import User

__all__ = [
    "BYPASS_ROLES",
    "Base",
    "Permission",
    "Position",
    "PositionPermission",
    "Restaurant",
    "RestaurantMembership",
    "Role",
    "Session",
    "TimestampMixin",
    "User",
]
