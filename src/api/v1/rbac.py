# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalog, position permission and permission check endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from src.api.deps import get_current_user, get_db, get_permission_engine
from src.api.errors import ApiError, ErrorCode
from src.exceptions import NotFoundError
from src.models import BYPASS_ROLES, Position, User
from src.rbac.engine import Decision, DecisionReason, PermissionEngine
from src.rbac.permissions import PermissionCode, parse_permission_codes
from src.schemas.rbac import (
    DecisionSchema,
    PermissionCatalogSchema,
    PermissionCheckRequest,
    PermissionSchema,
    PositionPermissionsSchema,
    PositionPermissionsUpdateSchema,
    PositionSummarySchema,
    UserPermissionsSchema,
)
from src.services import rbac_service

router = APIRouter()


def _load_position(db: Session, position_id: uuid.UUID) -> Position:
    try:
        return rbac_service.get_position(db, position_id)
    except NotFoundError as e:
        raise ApiError.not_found(ErrorCode.POSITION_NOT_FOUND, "Position not found") from e


def _ensure_permission(
    engine: PermissionEngine,
    user: User,
    restaurant_id: uuid.UUID,
    code: PermissionCode,
) -> None:
    decision = engine.check_permission(user.id, restaurant_id, code)
    if not decision.allowed:
        raise ApiError.forbidden(
            ErrorCode.FORBIDDEN_NO_PERMISSION,
            "Insufficient permissions",
            {"reason": decision.reason.value, "required": [code.value]},
        )


def _position_response(
    position: Position, permissions: list
) -> PositionPermissionsSchema:
    return PositionPermissionsSchema(
        position=PositionSummarySchema.model_validate(position),
        permissions=[PermissionSchema.model_validate(p) for p in permissions],
    )


@router.get(
    "/permissions",
    response_model=PermissionCatalogSchema,
    summary="List the permission catalog",
)
def list_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Retrieve every permission, flat and grouped by category."""
    permissions = rbac_service.list_permissions(db)
    grouped = rbac_service.group_permissions_by_category(permissions)
    return PermissionCatalogSchema(
        permissions=[PermissionSchema.model_validate(p) for p in permissions],
        grouped={
            category: [PermissionSchema.model_validate(p) for p in perms]
            for category, perms in grouped.items()
        },
    )


@router.get(
    "/permissions/position/{position_id}",
    response_model=PositionPermissionsSchema,
    summary="Get the permissions of a position",
)
def get_position_permissions(
    position_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    engine: PermissionEngine = Depends(get_permission_engine),
):
    """Retrieve a position and its assigned permissions.

    Requires VIEW_POSITIONS in the position's restaurant.
    """
    position = _load_position(db, position_id)
    _ensure_permission(
        engine, current_user, position.restaurant_id, PermissionCode.VIEW_POSITIONS
    )
    permissions = rbac_service.get_position_permissions(db, position_id)
    return _position_response(position, permissions)


@router.put(
    "/permissions/position/{position_id}",
    response_model=PositionPermissionsSchema,
    summary="Replace the permissions of a position",
)
def update_position_permissions(
    position_id: uuid.UUID,
    payload: PositionPermissionsUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    engine: PermissionEngine = Depends(get_permission_engine),
):
    """Replace the permission set of a position.

    Requires EDIT_POSITIONS in the position's restaurant.
    """
    position = _load_position(db, position_id)
    _ensure_permission(
        engine, current_user, position.restaurant_id, PermissionCode.EDIT_POSITIONS
    )
    try:
        permissions = rbac_service.set_position_permissions(
            db, position_id, payload.permission_ids
        )
    except NotFoundError as e:
        raise ApiError.bad_request(
            ErrorCode.PERMISSION_NOT_FOUND,
            "Some permissions not found",
            {"missing": str(e.identifier)},
        ) from e
    db.refresh(position)
    return _position_response(position, permissions)


def _user_permissions(
    engine: PermissionEngine, user_id: uuid.UUID, restaurant_id: uuid.UUID
) -> UserPermissionsSchema:
    codes = engine.get_user_permissions(user_id, restaurant_id)
    return UserPermissionsSchema(
        user_id=user_id,
        restaurant_id=restaurant_id,
        permissions=sorted(codes, key=lambda c: c.value),
        has_restaurant_access=engine.check_restaurant_access(user_id, restaurant_id),
    )


@router.get(
    "/permissions/me",
    response_model=UserPermissionsSchema,
    summary="Get the current user's permissions in a restaurant",
)
def get_my_permissions(
    restaurant_id: uuid.UUID = Query(...),
    current_user: User = Depends(get_current_user),
    engine: PermissionEngine = Depends(get_permission_engine),
):
    """Retrieve the caller's effective permissions in a restaurant."""
    return _user_permissions(engine, current_user.id, restaurant_id)


@router.get(
    "/permissions/user/{user_id}",
    response_model=UserPermissionsSchema,
    summary="Get a user's permissions in a restaurant",
)
def get_user_permissions(
    user_id: uuid.UUID,
    restaurant_id: uuid.UUID = Query(...),
    current_user: User = Depends(get_current_user),
    engine: PermissionEngine = Depends(get_permission_engine),
):
    """Retrieve a user's effective permissions in a restaurant.

    Users may query themselves; OWNER and ADMIN may query anybody.
    """
    if (
        not engine.is_data_owner(current_user.id, user_id)
        and current_user.role not in BYPASS_ROLES
    ):
        raise ApiError.forbidden(
            ErrorCode.FORBIDDEN_NO_PERMISSION,
            "Only your own permissions can be viewed",
        )
    return _user_permissions(engine, user_id, restaurant_id)


@router.post(
    "/permissions/check",
    response_model=DecisionSchema,
    summary="Check whether any of the given permissions is granted",
)
def check_permissions(
    payload: PermissionCheckRequest,
    current_user: User = Depends(get_current_user),
    engine: PermissionEngine = Depends(get_permission_engine),
):
    """Evaluate the caller's permissions, first granted code wins.

    Unknown codes can never be granted; they are reported back and skipped.
    """
    codes, unknown = parse_permission_codes(payload.codes)
    if codes:
        decision = engine.check_any_permission(
            current_user.id, payload.restaurant_id, codes
        )
    else:
        decision = Decision.deny(DecisionReason.UNKNOWN_PERMISSION)
    return DecisionSchema(
        allowed=decision.allowed,
        reason=decision.reason.value,
        unknown_codes=unknown,
    )
