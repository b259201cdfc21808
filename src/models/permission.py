# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalog model."""

import uuid

from sqlalchemy import Column, String, Text, Uuid

from src.models.base import Base, TimestampMixin


class Permission(Base, TimestampMixin):
    """A row of the permission catalog.

    Rows are seeded from the closed PermissionCode catalog; the code column
    always holds a PermissionCode value.
    """

    __tablename__ = "permissions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
