"""Effective permissions use case."""

from typing import Any

from stockroom.domain.principal import Principal


class EffectivePermissionsUseCase:
    """Resolve the ``resource:action`` set the caller's role grants right now."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, principal: Principal) -> dict[str, Any]:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(principal.role)
            if principal.is_superuser():
                permissions = await uow.permissions.list_active()
            elif role is None:
                permissions = []
            else:
                permissions = [
                    p for p in await uow.permissions.list_for_role(role.id) if p.is_active
                ]

        return {
            "user_id": principal.user_id,
            "role": principal.role,
            "role_level": role.level if role else None,
            "store_id": principal.store_id,
            "is_superuser": principal.is_superuser(),
            "permissions": sorted({p.full_name for p in permissions}),
        }
