# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission resolution engine.

Decides whether a user may perform an action in a restaurant. The engine
holds no state between calls and performs no I/O itself: every fact it needs
is read through a PolicyDataProvider. Provider faults propagate unchanged to
the caller; they are never turned into denials.

Evaluation order for a single permission (first matching rule wins):

1. OWNER/ADMIN role -> allowed.
2. No restaurant context -> only VIEW_RESTAURANTS is allowed.
3. Membership and manager status are looked up.
4. Manager -> allowed for MANAGER_AUTO_PERMISSIONS and VIEW_RESTAURANTS,
   otherwise fall through to the position and default grants.
5. Neither member nor manager -> only VIEW_RESTAURANTS is allowed.
6. Position-granted codes -> allowed.
7. DEFAULT_EMPLOYEE_PERMISSIONS -> allowed.
8. Denied.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from src.models.enums import BYPASS_ROLES, Role
from src.rbac.permissions import (
    ALL_PERMISSIONS,
    DEFAULT_EMPLOYEE_PERMISSIONS,
    MANAGER_AUTO_PERMISSIONS,
    PermissionCode,
)

logger = logging.getLogger(__name__)

EntityId = uuid.UUID | str


class PolicyDataProvider(ABC):
    """Read-only access to the facts the engine decides on."""

    @abstractmethod
    def get_user_role(self, user_id: EntityId) -> Role | None:
        """Return the user's global role, or None if the user is unknown."""
        ...

    @abstractmethod
    def get_restaurant_manager_id(self, restaurant_id: EntityId) -> EntityId | None:
        """Return the id of the restaurant's manager, if it has one."""
        ...

    @abstractmethod
    def is_restaurant_member(self, user_id: EntityId, restaurant_id: EntityId) -> bool:
        """Return True only for an active membership."""
        ...

    @abstractmethod
    def get_user_position_permissions(
        self, user_id: EntityId, restaurant_id: EntityId
    ) -> set[PermissionCode]:
        """Return the codes granted by the user's position in the restaurant."""
        ...


class DecisionReason(str, Enum):
    """Human-readable reason attached to every decision."""

    ROLE_BYPASS = "role bypass"
    RESTAURANT_LIST_WITHOUT_CONTEXT = "restaurant list visible without restaurant context"
    RESTAURANT_CONTEXT_REQUIRED = "restaurant context required"
    MANAGER_AUTO_GRANT = "manager auto-grant"
    RESTAURANT_LIST_FOR_ALL = "restaurant list visible to all users"
    NOT_A_MEMBER = "not a member"
    GRANTED_BY_POSITION = "granted by position"
    DEFAULT_EMPLOYEE_PERMISSION = "default employee permission"
    INSUFFICIENT_PERMISSIONS = "insufficient permissions"
    NONE_GRANTED = "none of the required permissions granted"
    UNKNOWN_PERMISSION = "unknown permission code"


@dataclass(frozen=True)
class Decision:
    """Outcome of a permission check."""

    allowed: bool
    reason: DecisionReason

    @classmethod
    def allow(cls, reason: DecisionReason) -> "Decision":
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: DecisionReason) -> "Decision":
        return cls(allowed=False, reason=reason)


class PermissionEngine:
    """Evaluates the layered authorization policy over a data provider.

    Construct one per unit of work; instances keep no mutable state, so a
    single instance may also be shared between concurrent callers.
    """

    def __init__(self, provider: PolicyDataProvider):
        self.provider = provider

    def _has_bypass_role(self, user_id: EntityId) -> bool:
        return self.provider.get_user_role(user_id) in BYPASS_ROLES

    def _is_manager(self, user_id: EntityId, restaurant_id: EntityId) -> bool:
        manager_id = self.provider.get_restaurant_manager_id(restaurant_id)
        return manager_id is not None and str(manager_id) == str(user_id)

    def check_permission(
        self,
        user_id: EntityId,
        restaurant_id: EntityId | None,
        code: PermissionCode,
    ) -> Decision:
        """Check a single permission for a user, optionally in a restaurant."""
        decision = self._evaluate(user_id, restaurant_id, code)
        logger.debug(
            f"Permission {code.value} for user={user_id} restaurant={restaurant_id}: "
            f"{'granted' if decision.allowed else 'denied'} ({decision.reason.value})"
        )
        return decision

    def _evaluate(
        self,
        user_id: EntityId,
        restaurant_id: EntityId | None,
        code: PermissionCode,
    ) -> Decision:
        if self._has_bypass_role(user_id):
            return Decision.allow(DecisionReason.ROLE_BYPASS)

        if not restaurant_id:
            if code == PermissionCode.VIEW_RESTAURANTS:
                return Decision.allow(DecisionReason.RESTAURANT_LIST_WITHOUT_CONTEXT)
            return Decision.deny(DecisionReason.RESTAURANT_CONTEXT_REQUIRED)

        is_member = self.provider.is_restaurant_member(user_id, restaurant_id)
        is_manager = self._is_manager(user_id, restaurant_id)

        if is_manager and (
            code in MANAGER_AUTO_PERMISSIONS or code == PermissionCode.VIEW_RESTAURANTS
        ):
            return Decision.allow(DecisionReason.MANAGER_AUTO_GRANT)

        if not is_member and not is_manager:
            if code == PermissionCode.VIEW_RESTAURANTS:
                return Decision.allow(DecisionReason.RESTAURANT_LIST_FOR_ALL)
            return Decision.deny(DecisionReason.NOT_A_MEMBER)

        # A manager without a membership has no position, so this is empty
        position_permissions = self.provider.get_user_position_permissions(
            user_id, restaurant_id
        )
        if code in position_permissions:
            return Decision.allow(DecisionReason.GRANTED_BY_POSITION)

        if code in DEFAULT_EMPLOYEE_PERMISSIONS:
            return Decision.allow(DecisionReason.DEFAULT_EMPLOYEE_PERMISSION)

        return Decision.deny(DecisionReason.INSUFFICIENT_PERMISSIONS)

    def check_any_permission(
        self,
        user_id: EntityId,
        restaurant_id: EntityId | None,
        codes: Iterable[PermissionCode],
    ) -> Decision:
        """Return the first allowing decision among codes, in the given order.

        A denial never carries the reason of an individual failed check.
        """
        for code in codes:
            decision = self.check_permission(user_id, restaurant_id, code)
            if decision.allowed:
                return decision
        return Decision.deny(DecisionReason.NONE_GRANTED)

    def get_user_permissions(
        self, user_id: EntityId, restaurant_id: EntityId
    ) -> frozenset[PermissionCode]:
        """Enumerate the codes a user holds in a restaurant."""
        if self._has_bypass_role(user_id):
            return ALL_PERMISSIONS

        if self._is_manager(user_id, restaurant_id):
            return MANAGER_AUTO_PERMISSIONS | {PermissionCode.VIEW_RESTAURANTS}

        if not self.provider.is_restaurant_member(user_id, restaurant_id):
            return DEFAULT_EMPLOYEE_PERMISSIONS

        position_permissions = self.provider.get_user_position_permissions(
            user_id, restaurant_id
        )
        return frozenset(position_permissions) | DEFAULT_EMPLOYEE_PERMISSIONS

    def check_restaurant_access(self, user_id: EntityId, restaurant_id: EntityId) -> bool:
        """Check whether a user may work with a restaurant's resources.

        Unlike check_permission, the universal VIEW_RESTAURANTS grant does not
        count: seeing the restaurant list is not access to this restaurant.
        """
        if self._has_bypass_role(user_id):
            return True
        if self._is_manager(user_id, restaurant_id):
            return True
        return self.provider.is_restaurant_member(user_id, restaurant_id)

    @staticmethod
    def is_data_owner(user_id: EntityId, target_user_id: EntityId) -> bool:
        """Check whether both ids name the same user."""
        return str(user_id) == str(target_user_id)
