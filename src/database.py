# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database engine and session factory."""

import functools
import logging
from collections.abc import Callable, Generator
from typing import ParamSpec, TypeVar

from sqlalchemy import create_engine
from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session, sessionmaker

from src.config import settings
from src.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def store_read(func: Callable[P, R]) -> Callable[P, R]:
    """Re-raise store failures as DataUnavailableError."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except (sa_exc.DBAPIError, sa_exc.TimeoutError) as e:
            logger.error(f"Store read failed in {func.__name__}: {e}")
            raise DataUnavailableError(f"Data unavailable: {func.__name__}") from e

    return wrapper
