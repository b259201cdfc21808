# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Restaurant model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.position import Position
    from src.models.restaurant_membership import RestaurantMembership
    from src.models.user import User


class Restaurant(Base, TimestampMixin):
    """A restaurant (tenant) with at most one designated manager."""

    __tablename__ = "restaurants"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Manager status is independent of membership
    manager_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    manager: Mapped[User | None] = relationship("User")
    positions: Mapped[list[Position]] = relationship(
        "Position",
        back_populates="restaurant",
        cascade="all, delete-orphan",
    )
    memberships: Mapped[list[RestaurantMembership]] = relationship(
        "RestaurantMembership",
        back_populates="restaurant",
        cascade="all, delete-orphan",
    )
