# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_exception_handlers
from src.config import settings
from src.database import SessionLocal, engine
from src.models import Base
from src.schemas.common import HealthResponse
from src.services.rbac_seed_service import seed_permission_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Startup: make sure the tables and the permission catalog are present
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_permission_catalog(db)
    finally:
        db.close()
    logger.info(f"{settings.app_name} started ({settings.environment})")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant restaurant staff management backend",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", response_model=HealthResponse)
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include API router after the app is configured
from src.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
