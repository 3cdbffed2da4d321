"""Helpers shared by the role use cases."""

from uuid import UUID

from stockroom.domain.entities import Role
from stockroom.domain.exceptions import ValidationError


async def ensure_active_permissions(uow, permission_ids: list[UUID]) -> None:
    """Every referenced permission must exist and be active."""
    if not permission_ids:
        return
    found = await uow.permissions.get_many(list(set(permission_ids)))
    if len([p for p in found if p.is_active]) != len(set(permission_ids)):
        raise ValidationError("Some permissions are invalid or inactive")


async def refresh_user_count(uow, role: Role) -> None:
    """Recompute the cached count of active users holding the role name."""
    role.user_count = await uow.users.count_active_by_role(role.name)
