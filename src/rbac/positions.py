# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Position templates created for every new restaurant."""

from src.rbac.permissions import PermissionCode

_STAFF_PERMISSIONS = [
    PermissionCode.VIEW_SCHEDULE,
    PermissionCode.VIEW_OWN_TASKS,
    PermissionCode.VIEW_OWN_TIMESHEETS,
    PermissionCode.REQUEST_SHIFT_SWAP,
    PermissionCode.VIEW_ANNOUNCEMENTS,
]

PRESET_POSITIONS: dict[str, list[PermissionCode]] = {
    "Waiter": list(_STAFF_PERMISSIONS),
    "Cook": list(_STAFF_PERMISSIONS),
    "Bartender": list(_STAFF_PERMISSIONS),
    "Shift Lead": [
        *_STAFF_PERMISSIONS,
        PermissionCode.VIEW_ALL_TASKS,
        PermissionCode.EDIT_TASKS,
        PermissionCode.VIEW_EMPLOYEES,
        PermissionCode.APPROVE_SHIFT_SWAP,
    ],
    "Administrator": [
        *_STAFF_PERMISSIONS,
        PermissionCode.EDIT_SCHEDULE,
        PermissionCode.VIEW_SHIFT_TYPES,
        PermissionCode.VIEW_ALL_TASKS,
        PermissionCode.EDIT_TASKS,
        PermissionCode.VIEW_ALL_TIMESHEETS,
        PermissionCode.VIEW_EMPLOYEES,
        PermissionCode.VIEW_POSITIONS,
        PermissionCode.VIEW_DEPARTMENTS,
        PermissionCode.APPROVE_SHIFT_SWAP,
        PermissionCode.SEND_ANNOUNCEMENTS,
        PermissionCode.VIEW_REPORTS,
    ],
}
