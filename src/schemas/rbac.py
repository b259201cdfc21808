# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission schemas."""
import uuid

from pydantic import BaseModel, ConfigDict, Field

from src.rbac.permissions import PermissionCode


class PermissionSchema(BaseModel):
    """Schema representing a catalog permission."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    code: str
    name: str
    category: str
    description: str | None = None


class PermissionCatalogSchema(BaseModel):
    """The whole catalog, flat and grouped by category."""

    permissions: list[PermissionSchema]
    grouped: dict[str, list[PermissionSchema]]


class PositionSummarySchema(BaseModel):
    """Minimal position information."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    restaurant_id: uuid.UUID


class PositionPermissionsSchema(BaseModel):
    """A position with its assigned permissions."""

    position: PositionSummarySchema
    permissions: list[PermissionSchema]


class PositionPermissionsUpdateSchema(BaseModel):
    """Replacement set of permission ids for a position."""

    permission_ids: list[uuid.UUID]


class UserPermissionsSchema(BaseModel):
    """Effective permissions of a user in a restaurant."""

    user_id: uuid.UUID
    restaurant_id: uuid.UUID
    permissions: list[PermissionCode]
    has_restaurant_access: bool


class PermissionCheckRequest(BaseModel):
    """Ask whether any of the codes is granted."""

    restaurant_id: uuid.UUID | None = None
    # Raw strings: unknown codes are reported, not rejected
    codes: list[str] = Field(..., min_length=1)


class DecisionSchema(BaseModel):
    """Outcome of a permission check."""

    allowed: bool
    reason: str
    unknown_codes: list[str] = []
