# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Closed permission catalog and the static policy tables."""

from collections.abc import Iterable
from enum import Enum


class PermissionCode(str, Enum):
    """Every grantable capability in the system."""

    # Restaurants
    VIEW_RESTAURANTS = "VIEW_RESTAURANTS"
    EDIT_RESTAURANTS = "EDIT_RESTAURANTS"

    # Schedule (always the whole restaurant's schedule)
    VIEW_SCHEDULE = "VIEW_SCHEDULE"
    EDIT_SCHEDULE = "EDIT_SCHEDULE"

    # Shift types
    VIEW_SHIFT_TYPES = "VIEW_SHIFT_TYPES"
    EDIT_SHIFT_TYPES = "EDIT_SHIFT_TYPES"

    # Tasks
    VIEW_OWN_TASKS = "VIEW_OWN_TASKS"
    VIEW_ALL_TASKS = "VIEW_ALL_TASKS"
    EDIT_TASKS = "EDIT_TASKS"

    # Timesheets
    VIEW_OWN_TIMESHEETS = "VIEW_OWN_TIMESHEETS"
    VIEW_ALL_TIMESHEETS = "VIEW_ALL_TIMESHEETS"
    EDIT_TIMESHEETS = "EDIT_TIMESHEETS"

    # Employees
    VIEW_EMPLOYEES = "VIEW_EMPLOYEES"
    EDIT_EMPLOYEES = "EDIT_EMPLOYEES"

    # Positions
    VIEW_POSITIONS = "VIEW_POSITIONS"
    EDIT_POSITIONS = "EDIT_POSITIONS"

    # Departments
    VIEW_DEPARTMENTS = "VIEW_DEPARTMENTS"
    EDIT_DEPARTMENTS = "EDIT_DEPARTMENTS"

    # Shift swaps
    REQUEST_SHIFT_SWAP = "REQUEST_SHIFT_SWAP"
    APPROVE_SHIFT_SWAP = "APPROVE_SHIFT_SWAP"

    # Announcements
    SEND_ANNOUNCEMENTS = "SEND_ANNOUNCEMENTS"
    VIEW_ANNOUNCEMENTS = "VIEW_ANNOUNCEMENTS"

    # Reports
    VIEW_REPORTS = "VIEW_REPORTS"
    EXPORT_REPORTS = "EXPORT_REPORTS"


ALL_PERMISSIONS: frozenset[PermissionCode] = frozenset(PermissionCode)

# Granted to a restaurant's manager regardless of position
MANAGER_AUTO_PERMISSIONS: frozenset[PermissionCode] = frozenset(
    {
        PermissionCode.VIEW_SCHEDULE,
        PermissionCode.EDIT_SCHEDULE,
        PermissionCode.VIEW_SHIFT_TYPES,
        PermissionCode.EDIT_SHIFT_TYPES,
        PermissionCode.VIEW_ALL_TASKS,
        PermissionCode.EDIT_TASKS,
        PermissionCode.VIEW_ALL_TIMESHEETS,
        PermissionCode.EDIT_TIMESHEETS,
        PermissionCode.VIEW_EMPLOYEES,
        PermissionCode.EDIT_EMPLOYEES,
        PermissionCode.VIEW_POSITIONS,
        PermissionCode.EDIT_POSITIONS,
        PermissionCode.VIEW_DEPARTMENTS,
        PermissionCode.EDIT_DEPARTMENTS,
    }
)

# Minimal set every active member receives, whatever the position
DEFAULT_EMPLOYEE_PERMISSIONS: frozenset[PermissionCode] = frozenset(
    {
        PermissionCode.VIEW_SCHEDULE,
        PermissionCode.VIEW_OWN_TASKS,
        PermissionCode.VIEW_OWN_TIMESHEETS,
    }
)

PERMISSION_DEFINITIONS = [
    {
        "code": PermissionCode.VIEW_RESTAURANTS,
        "name": "View restaurants",
        "category": "RESTAURANTS",
        "description": "See the list of restaurants",
    },
    {
        "code": PermissionCode.EDIT_RESTAURANTS,
        "name": "Edit restaurants",
        "category": "RESTAURANTS",
        "description": "Create and edit restaurants",
    },
    {
        "code": PermissionCode.VIEW_SCHEDULE,
        "name": "View schedule",
        "category": "SCHEDULE",
        "description": "View the restaurant work schedule",
    },
    {
        "code": PermissionCode.EDIT_SCHEDULE,
        "name": "Edit schedule",
        "category": "SCHEDULE",
        "description": "Create and edit shifts in the schedule",
    },
    {
        "code": PermissionCode.VIEW_SHIFT_TYPES,
        "name": "View shift types",
        "category": "SHIFT_TYPES",
        "description": "View shift templates",
    },
    {
        "code": PermissionCode.EDIT_SHIFT_TYPES,
        "name": "Edit shift types",
        "category": "SHIFT_TYPES",
        "description": "Create and edit shift templates",
    },
    {
        "code": PermissionCode.VIEW_OWN_TASKS,
        "name": "View own tasks",
        "category": "TASKS",
        "description": "View tasks the user created or is assigned to",
    },
    {
        "code": PermissionCode.VIEW_ALL_TASKS,
        "name": "View all tasks",
        "category": "TASKS",
        "description": "View every task of the restaurant",
    },
    {
        "code": PermissionCode.EDIT_TASKS,
        "name": "Edit tasks",
        "category": "TASKS",
        "description": "Create and edit tasks",
    },
    {
        "code": PermissionCode.VIEW_OWN_TIMESHEETS,
        "name": "View own timesheets",
        "category": "TIMESHEETS",
        "description": "View own timesheets and pay",
    },
    {
        "code": PermissionCode.VIEW_ALL_TIMESHEETS,
        "name": "View all timesheets",
        "category": "TIMESHEETS",
        "description": "View every timesheet of the restaurant",
    },
    {
        "code": PermissionCode.EDIT_TIMESHEETS,
        "name": "Edit timesheets",
        "category": "TIMESHEETS",
        "description": "Edit working time records",
    },
    {
        "code": PermissionCode.VIEW_EMPLOYEES,
        "name": "View employees",
        "category": "EMPLOYEES",
        "description": "View the staff list",
    },
    {
        "code": PermissionCode.EDIT_EMPLOYEES,
        "name": "Edit employees",
        "category": "EMPLOYEES",
        "description": "Add and edit staff members",
    },
    {
        "code": PermissionCode.VIEW_POSITIONS,
        "name": "View positions",
        "category": "POSITIONS",
        "description": "View the list of positions",
    },
    {
        "code": PermissionCode.EDIT_POSITIONS,
        "name": "Edit positions",
        "category": "POSITIONS",
        "description": "Create and edit positions",
    },
    {
        "code": PermissionCode.VIEW_DEPARTMENTS,
        "name": "View departments",
        "category": "DEPARTMENTS",
        "description": "View the list of departments",
    },
    {
        "code": PermissionCode.EDIT_DEPARTMENTS,
        "name": "Edit departments",
        "category": "DEPARTMENTS",
        "description": "Create and edit departments",
    },
    {
        "code": PermissionCode.REQUEST_SHIFT_SWAP,
        "name": "Request shift swap",
        "category": "SWAPS",
        "description": "Ask a colleague to take over a shift",
    },
    {
        "code": PermissionCode.APPROVE_SHIFT_SWAP,
        "name": "Approve shift swap",
        "category": "SWAPS",
        "description": "Approve or reject shift swap requests",
    },
    {
        "code": PermissionCode.SEND_ANNOUNCEMENTS,
        "name": "Send announcements",
        "category": "ANNOUNCEMENTS",
        "description": "Send announcements to restaurant staff",
    },
    {
        "code": PermissionCode.VIEW_ANNOUNCEMENTS,
        "name": "View announcements",
        "category": "ANNOUNCEMENTS",
        "description": "Read restaurant announcements",
    },
    {
        "code": PermissionCode.VIEW_REPORTS,
        "name": "View reports",
        "category": "REPORTS",
        "description": "View analytics and reports",
    },
    {
        "code": PermissionCode.EXPORT_REPORTS,
        "name": "Export reports",
        "category": "REPORTS",
        "description": "Export reports to files",
    },
]


def parse_permission_code(raw: str) -> PermissionCode | None:
    """Convert a raw string to a PermissionCode, or None if it is unknown."""
    try:
        return PermissionCode(raw)
    except ValueError:
        return None


def parse_permission_codes(
    raw_codes: Iterable[str],
) -> tuple[list[PermissionCode], list[str]]:
    """Split raw strings into known codes (order kept) and unknown strings."""
    valid: list[PermissionCode] = []
    invalid: list[str] = []

    for raw in raw_codes:
        code = parse_permission_code(raw)
        if code is None:
            invalid.append(raw)
        elif code not in valid:
            valid.append(code)

    return valid, invalid
