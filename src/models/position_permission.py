# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Position to permission association."""

from sqlalchemy import Column, ForeignKey, PrimaryKeyConstraint, Uuid
from sqlalchemy.orm import relationship

from src.models.base import Base


class PositionPermission(Base):
    """Association table mapping positions to their granted permissions."""

    __tablename__ = "position_permissions"

    position_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("positions.id", ondelete="CASCADE"),
        index=True,
    )
    permission_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("permissions.id", ondelete="CASCADE"),
        index=True,
    )

    __table_args__ = (PrimaryKeyConstraint("position_id", "permission_id"),)

    position = relationship("Position", back_populates="permissions")
    permission = relationship("Permission")
