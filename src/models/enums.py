# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class Role(str, Enum):
    """Global user role, independent of any restaurant."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


# Roles that bypass every restaurant-level check
BYPASS_ROLES: frozenset[Role] = frozenset({Role.OWNER, Role.ADMIN})
