# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Restaurant schemas."""
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field


class RestaurantCreate(BaseModel):
    """Schema for creating a restaurant."""

    name: str = Field(..., min_length=1, max_length=200)
    address: str | None = Field(None, max_length=500)
    manager_id: uuid.UUID | None = None


class RestaurantResponse(BaseModel):
    """Schema for restaurant response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    address: str | None
    manager_id: uuid.UUID | None
    created_at: datetime.datetime
    updated_at: datetime.datetime
