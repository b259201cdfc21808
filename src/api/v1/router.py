# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import rbac, restaurants
from src.schemas.common import ErrorResponse

# Every v1 endpoint sits behind the session and permission gates
error_responses = {
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    403: {"model": ErrorResponse, "description": "Forbidden"},
    503: {"model": ErrorResponse, "description": "Data temporarily unavailable"},
}

api_router = APIRouter(responses=error_responses)

# Permission routes
api_router.include_router(rbac.router, tags=["permissions"])

# Restaurant routes
api_router.include_router(restaurants.router, tags=["restaurants"])
