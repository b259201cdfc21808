# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the permission catalog and preset positions."""

from src.rbac.permissions import (
    ALL_PERMISSIONS,
    DEFAULT_EMPLOYEE_PERMISSIONS,
    MANAGER_AUTO_PERMISSIONS,
    PERMISSION_DEFINITIONS,
    PermissionCode,
    parse_permission_code,
    parse_permission_codes,
)
from src.rbac.positions import PRESET_POSITIONS


class TestPolicyTables:
    """Static policy tables."""

    def test_catalog_contains_every_code(self):
        assert ALL_PERMISSIONS == set(PermissionCode)

    def test_manager_auto_permissions_exclude_restaurant_codes(self):
        assert PermissionCode.VIEW_RESTAURANTS not in MANAGER_AUTO_PERMISSIONS
        assert PermissionCode.EDIT_RESTAURANTS not in MANAGER_AUTO_PERMISSIONS

    def test_manager_auto_permissions_cover_staff_management(self):
        assert {
            PermissionCode.EDIT_SCHEDULE,
            PermissionCode.EDIT_EMPLOYEES,
            PermissionCode.EDIT_POSITIONS,
            PermissionCode.EDIT_TIMESHEETS,
        } <= MANAGER_AUTO_PERMISSIONS

    def test_default_employee_permissions(self):
        assert DEFAULT_EMPLOYEE_PERMISSIONS == {
            PermissionCode.VIEW_SCHEDULE,
            PermissionCode.VIEW_OWN_TASKS,
            PermissionCode.VIEW_OWN_TIMESHEETS,
        }

    def test_every_code_has_one_definition(self):
        codes = [d["code"] for d in PERMISSION_DEFINITIONS]
        assert len(codes) == len(set(codes))
        assert set(codes) == set(PermissionCode)

    def test_definitions_are_complete(self):
        for definition in PERMISSION_DEFINITIONS:
            assert definition["name"]
            assert definition["category"]
            assert definition["description"]


class TestParsing:
    """Boundary parsing of raw permission strings."""

    def test_parse_known_code(self):
        assert parse_permission_code("EDIT_TASKS") is PermissionCode.EDIT_TASKS

    def test_parse_unknown_code(self):
        assert parse_permission_code("DELETE_EVERYTHING") is None
        assert parse_permission_code("view_schedule") is None

    def test_parse_many_keeps_order_and_drops_duplicates(self):
        valid, invalid = parse_permission_codes(
            ["EDIT_TASKS", "NOPE", "VIEW_SCHEDULE", "EDIT_TASKS", ""]
        )
        assert valid == [PermissionCode.EDIT_TASKS, PermissionCode.VIEW_SCHEDULE]
        assert invalid == ["NOPE", ""]

    def test_parse_empty(self):
        assert parse_permission_codes([]) == ([], [])


class TestPresetPositions:
    """Position templates for new restaurants."""

    def test_names(self):
        assert list(PRESET_POSITIONS) == [
            "Waiter",
            "Cook",
            "Bartender",
            "Shift Lead",
            "Administrator",
        ]

    def test_every_preset_includes_default_permissions(self):
        for codes in PRESET_POSITIONS.values():
            assert DEFAULT_EMPLOYEE_PERMISSIONS <= set(codes)

    def test_presets_have_no_duplicates(self):
        for codes in PRESET_POSITIONS.values():
            assert len(codes) == len(set(codes))
