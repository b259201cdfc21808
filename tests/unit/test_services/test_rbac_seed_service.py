# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for rbac_seed_service."""

from src.models import Permission, Position, PositionPermission
from src.rbac.permissions import PERMISSION_DEFINITIONS, PermissionCode
from src.rbac.positions import PRESET_POSITIONS
from src.services import rbac_seed_service, rbac_service


def test_seed_creates_full_catalog(db_session):
    created = rbac_seed_service.seed_permission_catalog(db_session)

    assert created == len(PERMISSION_DEFINITIONS)
    codes = {code for (code,) in db_session.query(Permission.code).all()}
    assert codes == {c.value for c in PermissionCode}


def test_seed_is_idempotent(db_session):
    rbac_seed_service.seed_permission_catalog(db_session)
    assert rbac_seed_service.seed_permission_catalog(db_session) == 0
    assert db_session.query(Permission).count() == len(PERMISSION_DEFINITIONS)


def test_seed_fills_gaps(db_session):
    rbac_seed_service.seed_permission_catalog(db_session)
    db_session.query(Permission).filter(Permission.code == "EXPORT_REPORTS").delete()
    db_session.commit()

    assert rbac_seed_service.seed_permission_catalog(db_session) == 1


def test_preset_positions(db_session, make_restaurant, seeded_catalog):
    restaurant = make_restaurant()

    position_ids = rbac_seed_service.create_preset_positions(db_session, restaurant.id)
    db_session.commit()

    assert len(position_ids) == len(PRESET_POSITIONS)
    positions = db_session.query(Position).filter(Position.restaurant_id == restaurant.id).all()
    by_name = {p.name: p for p in positions}
    assert set(by_name) == set(PRESET_POSITIONS)

    for name, codes in PRESET_POSITIONS.items():
        assigned = rbac_service.get_position_permissions(db_session, by_name[name].id)
        assert {p.code for p in assigned} == {c.value for c in codes}


def test_preset_positions_skip_unseeded_codes(db_session, make_restaurant):
    restaurant = make_restaurant()

    position_ids = rbac_seed_service.create_preset_positions(db_session, restaurant.id)
    db_session.commit()

    assert len(position_ids) == len(PRESET_POSITIONS)
    assert db_session.query(PositionPermission).count() == 0
