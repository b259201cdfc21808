# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Restaurant API endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission, require_restaurant_access
from src.api.errors import ApiError, ErrorCode
from src.exceptions import NotFoundError
from src.models import User
from src.rbac.permissions import PermissionCode
from src.schemas.restaurant import RestaurantCreate, RestaurantResponse
from src.services import restaurant_service

router = APIRouter()


@router.get(
    "/restaurants",
    response_model=list[RestaurantResponse],
    summary="List accessible restaurants",
)
def list_restaurants(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(PermissionCode.VIEW_RESTAURANTS)),
):
    """List the restaurants the current user manages or works in.

    OWNER and ADMIN see every restaurant.
    """
    return restaurant_service.list_restaurants_for_user(db, current_user)


@router.post(
    "/restaurants",
    response_model=RestaurantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a restaurant",
)
def create_restaurant(
    data: RestaurantCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(PermissionCode.EDIT_RESTAURANTS)),
):
    """Create a restaurant with the preset positions.

    Requires EDIT_RESTAURANTS outside any restaurant context.
    """
    try:
        return restaurant_service.create_restaurant(
            db, name=data.name, address=data.address, manager_id=data.manager_id
        )
    except NotFoundError as e:
        raise ApiError.not_found(ErrorCode.USER_NOT_FOUND, "Manager not found") from e


@router.get(
    "/restaurants/{restaurant_id}",
    response_model=RestaurantResponse,
    summary="Get a restaurant",
)
def get_restaurant(
    restaurant_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_restaurant_access()),
):
    """Retrieve a restaurant the current user has access to."""
    try:
        return restaurant_service.get_restaurant(db, restaurant_id)
    except NotFoundError as e:
        raise ApiError.not_found(
            ErrorCode.RESTAURANT_NOT_FOUND, "Restaurant not found"
        ) from e
