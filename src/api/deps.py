# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import logging
import uuid

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from src.api.errors import ApiError, ErrorCode
from src.config import settings
from src.database import get_db
from src.models import User
from src.rbac.engine import PermissionEngine
from src.rbac.permissions import PermissionCode
from src.services import auth_service, rbac_service

logger = logging.getLogger(__name__)

__all__ = [
    "get_current_user",
    "get_db",
    "get_permission_engine",
    "require_permission",
    "require_restaurant_access",
]


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """Get current authenticated user from session cookie."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise ApiError.unauthorized(ErrorCode.AUTH_SESSION_MISSING, "Not authenticated")

    session_obj = auth_service.get_session(db, token)
    if not session_obj:
        raise ApiError.unauthorized(
            ErrorCode.AUTH_SESSION_INVALID, "Invalid or expired session"
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise ApiError.unauthorized(
            ErrorCode.AUTH_USER_INACTIVE, "User not found or inactive"
        )

    return user


def get_permission_engine(db: Session = Depends(get_db)) -> PermissionEngine:
    """Get a permission engine bound to the request's database session."""
    return rbac_service.get_permission_engine(db)


def _resolve_restaurant_id(request: Request, param: str) -> uuid.UUID | None:
    raw = request.path_params.get(param) or request.query_params.get(param)
    if not raw:
        return None
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError) as e:
        raise ApiError(
            422, ErrorCode.VALIDATION_FAILED, f"Invalid {param}: {raw}"
        ) from e


def require_permission(
    *codes: PermissionCode, restaurant_id_param: str = "restaurant_id"
):
    """Dependency allowing the request when any of the codes is granted.

    The restaurant context is read from the path parameter or query parameter
    named restaurant_id_param; without one only context-free grants apply.
    """
    if not codes:
        raise ValueError("require_permission needs at least one permission code")

    def dependency(
        request: Request,
        current_user: User = Depends(get_current_user),
        engine: PermissionEngine = Depends(get_permission_engine),
    ) -> User:
        restaurant_id = _resolve_restaurant_id(request, restaurant_id_param)
        decision = engine.check_any_permission(current_user.id, restaurant_id, codes)
        if not decision.allowed:
            logger.info(
                f"Denied {[c.value for c in codes]} to user {current_user.id} "
                f"in restaurant {restaurant_id}: {decision.reason.value}"
            )
            raise ApiError.forbidden(
                ErrorCode.FORBIDDEN_NO_PERMISSION,
                "Insufficient permissions",
                {
                    "reason": decision.reason.value,
                    "required": [c.value for c in codes],
                },
            )
        return current_user

    return dependency


def require_restaurant_access(restaurant_id_param: str = "restaurant_id"):
    """Dependency allowing the request for users with access to the restaurant."""

    def dependency(
        request: Request,
        current_user: User = Depends(get_current_user),
        engine: PermissionEngine = Depends(get_permission_engine),
    ) -> User:
        restaurant_id = _resolve_restaurant_id(request, restaurant_id_param)
        if restaurant_id is None:
            raise ApiError.bad_request(
                ErrorCode.VALIDATION_FAILED, "Restaurant ID is required"
            )
        if not engine.check_restaurant_access(current_user.id, restaurant_id):
            logger.info(
                f"Denied access to restaurant {restaurant_id} for user {current_user.id}"
            )
            raise ApiError.forbidden(
                ErrorCode.FORBIDDEN_NO_RESTAURANT_ACCESS,
                "No access to this restaurant",
            )
        return current_user

    return dependency
