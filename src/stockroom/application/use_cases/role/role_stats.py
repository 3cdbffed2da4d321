"""Role statistics use case."""

from typing import Any


class RoleStatsUseCase:
    """Role counts and per-role user distribution."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> dict[str, Any]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
            usage = []
            for role in roles:
                holders = await uow.users.list(role=role.name)
                usage.append({
                    "id": str(role.id),
                    "name": role.name,
                    "user_count": len(holders),
                    "is_default": role.is_default,
                })

        usage.sort(key=lambda r: r["user_count"], reverse=True)
        active = sum(1 for r in roles if r.is_active)
        default = sum(1 for r in roles if r.is_default)
        return {
            "total_roles": len(roles),
            "active_roles": active,
            "inactive_roles": len(roles) - active,
            "default_roles": default,
            "custom_roles": len(roles) - default,
            "role_usage": usage,
        }
