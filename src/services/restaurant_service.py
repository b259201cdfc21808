# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Restaurant service."""

import uuid

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from src.exceptions import NotFoundError
from src.models import BYPASS_ROLES, Restaurant, RestaurantMembership, User
from src.services.rbac_seed_service import create_preset_positions


def get_restaurant(db: Session, restaurant_id: uuid.UUID) -> Restaurant:
    """Get a restaurant by ID or raise NotFoundError."""
    restaurant = db.query(Restaurant).filter(Restaurant.id == restaurant_id).first()
    if not restaurant:
        raise NotFoundError("Restaurant", restaurant_id)
    return restaurant


def create_restaurant(
    db: Session,
    name: str,
    address: str | None = None,
    manager_id: uuid.UUID | None = None,
) -> Restaurant:
    """Create a restaurant together with its preset positions."""
    if manager_id is not None and not db.query(User.id).filter(User.id == manager_id).first():
        raise NotFoundError("User", manager_id)

    restaurant = Restaurant(name=name, address=address, manager_id=manager_id)
    db.add(restaurant)
    db.flush()

    create_preset_positions(db, restaurant.id)

    db.commit()
    db.refresh(restaurant)
    return restaurant


def list_restaurants_for_user(db: Session, user: User) -> list[Restaurant]:
    """List restaurants the user can access.

    OWNER and ADMIN see every restaurant; everybody else sees the ones they
    manage or hold an active membership in.
    """
    query = db.query(Restaurant)
    if user.role not in BYPASS_ROLES:
        member_of = select(RestaurantMembership.restaurant_id).where(
            RestaurantMembership.user_id == user.id,
            RestaurantMembership.is_active.is_(True),
        )
        query = query.filter(
            or_(Restaurant.manager_id == user.id, Restaurant.id.in_(member_of))
        )
    return query.order_by(Restaurant.name).all()
