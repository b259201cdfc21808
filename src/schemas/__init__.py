"""Pydantic schemas package."""
from src.schemas.common import ErrorResponse, HealthResponse
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
from src.schemas.restaurant import RestaurantCreate, RestaurantResponse

__all__ = [
    "DecisionSchema",
    "ErrorResponse",
    "HealthResponse",
    "PermissionCatalogSchema",
    "PermissionCheckRequest",
    "PermissionSchema",
    "PositionPermissionsSchema",
    "PositionPermissionsUpdateSchema",
    "PositionSummarySchema",
    "RestaurantCreate",
    "RestaurantResponse",
    "UserPermissionsSchema",
]
