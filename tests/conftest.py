# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import uuid

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["ENVIRONMENT"] = "test"

from src.config import settings
from src.database import SessionLocal, engine, get_db
from src.main import app
from src.models import (
    Permission,
    Position,
    PositionPermission,
    Restaurant,
    RestaurantMembership,
    Role,
    User,
)
from src.models.base import Base
from src.rbac.permissions import PermissionCode
from src.services import auth_service
from src.services.rbac_seed_service import seed_permission_catalog


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_catalog(db_session):
    """Seed the permission catalog."""
    seed_permission_catalog(db_session)
    return {p.code: p for p in db_session.query(Permission).all()}


@pytest.fixture
def make_user(db_session):
    """Factory creating persisted users."""

    def _make_user(role: Role = Role.EMPLOYEE, is_active: bool = True) -> User:
        suffix = uuid.uuid4().hex[:8]
        user = User(
            email=f"{role.value.lower()}-{suffix}@example.com",
            first_name="Test",
            last_name=role.value.title(),
            role=role,
            is_active=is_active,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_restaurant(db_session):
    """Factory creating persisted restaurants without preset positions."""

    def _make_restaurant(manager: User | None = None, name: str = "Bistro") -> Restaurant:
        restaurant = Restaurant(
            name=name,
            address="1 Main Street",
            manager_id=manager.id if manager else None,
        )
        db_session.add(restaurant)
        db_session.commit()
        db_session.refresh(restaurant)
        return restaurant

    return _make_restaurant


@pytest.fixture
def make_membership(db_session, seeded_catalog):
    """Factory placing a user in a restaurant through a new position."""

    def _make_membership(
        user: User,
        restaurant: Restaurant,
        codes: list[PermissionCode] | None = None,
        is_active: bool = True,
        position_active: bool = True,
    ) -> RestaurantMembership:
        position = Position(
            restaurant_id=restaurant.id,
            name=f"Position {uuid.uuid4().hex[:6]}",
            is_active=position_active,
        )
        db_session.add(position)
        db_session.flush()
        for code in codes or []:
            db_session.add(
                PositionPermission(
                    position_id=position.id,
                    permission_id=seeded_catalog[code.value].id,
                )
            )
        membership = RestaurantMembership(
            user_id=user.id,
            restaurant_id=restaurant.id,
            position_id=position.id,
            is_active=is_active,
        )
        db_session.add(membership)
        db_session.commit()
        db_session.refresh(membership)
        return membership

    return _make_membership


@pytest.fixture
def login(client, db_session):
    """Authenticate the test client as the given user."""

    def _login(user: User) -> TestClient:
        token = auth_service.create_session(db_session, user.id)
        client.cookies.set(settings.session_cookie_name, token)
        return client

    return _login
