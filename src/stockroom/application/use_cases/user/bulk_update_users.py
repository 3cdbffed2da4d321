"""Bulk update users use case."""

from typing import Any

from stockroom.application.use_cases.user.admin_guard import (
    ensure_admins_remain,
    is_active_admin,
)
from stockroom.application.use_cases.user.save_user import ensure_role_exists
from stockroom.domain.exceptions import ValidationError
from stockroom.domain.value_objects import HierarchyRole

BULK_FIELDS = frozenset({"role", "is_active", "store_id"})


def _check_types(updates: dict[str, Any]) -> None:
    # Only a real False deactivates, so "false" or 0 must not slip past the admin guard.
    if "is_active" in updates and not isinstance(updates["is_active"], bool):
        raise ValidationError("is_active must be a boolean")
    if "role" in updates and not isinstance(updates["role"], str):
        raise ValidationError("role must be a string")
    store_id = updates.get("store_id")
    if store_id is not None and not isinstance(store_id, str):
        raise ValidationError("store_id must be a string or null")


class BulkUpdateUsersUseCase:
    """Apply the same field updates to many users."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_ids: list[str], updates: dict[str, Any]) -> int:
        """Return the number of users updated."""
        if not user_ids:
            raise ValidationError("User IDs array is required")
        if not updates:
            raise ValidationError("Updates are required")
        unknown = set(updates) - BULK_FIELDS
        if unknown:
            raise ValidationError(f"Fields cannot be bulk updated: {', '.join(sorted(unknown))}")
        _check_types(updates)

        async with self._uow_factory() as uow:
            if "role" in updates:
                await ensure_role_exists(uow, updates["role"])

            demotes = updates.get("role", HierarchyRole.ADMIN) != HierarchyRole.ADMIN
            deactivates = updates.get("is_active", True) is False
            if demotes or deactivates:
                targets = await uow.users.get_many(user_ids)
                removed = sum(1 for u in targets if is_active_admin(u))
                await ensure_admins_remain(uow, removed, "Cannot modify the last admin user")

            return await uow.users.bulk_update(user_ids, updates)
