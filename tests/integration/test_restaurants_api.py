# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the restaurant endpoints."""

import uuid

from src.models import Position, Role
from src.rbac.positions import PRESET_POSITIONS


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestListRestaurants:
    def test_requires_authentication(self, client):
        response = client.get("/api/v1/restaurants")
        assert response.status_code == 401

    def test_owner_sees_all(self, login, make_user, make_restaurant):
        make_restaurant(name="Bistro")
        make_restaurant(name="Alpha")
        client = login(make_user(Role.OWNER))

        response = client.get("/api/v1/restaurants")

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["Alpha", "Bistro"]

    def test_employee_sees_own(self, login, make_user, make_restaurant, make_membership):
        employee = make_user()
        mine = make_restaurant(name="Mine")
        make_restaurant(name="Elsewhere")
        make_membership(employee, mine)
        client = login(employee)

        response = client.get("/api/v1/restaurants")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [str(mine.id)]

    def test_unaffiliated_user_gets_empty_list(self, login, make_user, make_restaurant):
        make_restaurant()
        client = login(make_user())

        response = client.get("/api/v1/restaurants")

        assert response.status_code == 200
        assert response.json() == []


class TestCreateRestaurant:
    def test_admin_creates(self, login, make_user):
        manager = make_user(Role.MANAGER)
        client = login(make_user(Role.ADMIN))

        response = client.post(
            "/api/v1/restaurants",
            json={"name": "Trattoria", "address": "2 Side St", "manager_id": str(manager.id)},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Trattoria"
        assert body["manager_id"] == str(manager.id)

        # The new manager can work with the preset positions straight away
        manager_client = login(manager)
        response = manager_client.get(
            "/api/v1/permissions/me", params={"restaurant_id": body["id"]}
        )
        assert "EDIT_POSITIONS" in response.json()["permissions"]

    def test_manager_cannot_create(self, login, make_user):
        client = login(make_user(Role.MANAGER))

        response = client.post("/api/v1/restaurants", json={"name": "Trattoria"})

        assert response.status_code == 403
        body = response.json()
        assert body["code"] == "FORBIDDEN_NO_PERMISSION"
        assert body["details"]["reason"] == "none of the required permissions granted"
        assert body["details"]["required"] == ["EDIT_RESTAURANTS"]

    def test_unknown_manager(self, login, make_user):
        client = login(make_user(Role.OWNER))

        response = client.post(
            "/api/v1/restaurants",
            json={"name": "Trattoria", "manager_id": str(uuid.uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_blank_name_rejected(self, login, make_user):
        client = login(make_user(Role.OWNER))
        response = client.post("/api/v1/restaurants", json={"name": ""})
        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_FAILED"


class TestGetRestaurant:
    def test_member_has_access(self, login, make_user, make_restaurant, make_membership):
        employee = make_user()
        restaurant = make_restaurant()
        make_membership(employee, restaurant)
        client = login(employee)

        response = client.get(f"/api/v1/restaurants/{restaurant.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(restaurant.id)

    def test_manager_has_access(self, login, make_user, make_restaurant):
        manager = make_user(Role.MANAGER)
        restaurant = make_restaurant(manager=manager)
        client = login(manager)

        assert client.get(f"/api/v1/restaurants/{restaurant.id}").status_code == 200

    def test_former_member_is_rejected(
        self, login, make_user, make_restaurant, make_membership
    ):
        employee = make_user()
        restaurant = make_restaurant()
        make_membership(employee, restaurant, is_active=False)
        client = login(employee)

        response = client.get(f"/api/v1/restaurants/{restaurant.id}")

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN_NO_RESTAURANT_ACCESS"

    def test_unknown_restaurant(self, login, make_user):
        client = login(make_user(Role.OWNER))
        response = client.get(f"/api/v1/restaurants/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["code"] == "RESTAURANT_NOT_FOUND"


def test_preset_positions_visible_to_manager(login, make_user, db_session):
    manager = make_user(Role.MANAGER)
    client = login(make_user(Role.OWNER))
    restaurant_id = client.post(
        "/api/v1/restaurants", json={"name": "Diner", "manager_id": str(manager.id)}
    ).json()["id"]

    positions = (
        db_session.query(Position)
        .filter(Position.restaurant_id == uuid.UUID(restaurant_id))
        .all()
    )
    assert {p.name for p in positions} == set(PRESET_POSITIONS)

    client = login(manager)
    for position in positions:
        response = client.get(f"/api/v1/permissions/position/{position.id}")
        assert response.status_code == 200


def test_openapi_documents_error_body(client):
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/api/v1/restaurants"]["get"]["responses"]
    assert {"401", "403", "503"} <= set(responses)
    assert "ErrorResponse" in schema["components"]["schemas"]
