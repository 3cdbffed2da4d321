"""User statistics use case."""

from typing import Any

from stockroom.domain.value_objects import HierarchyRole


class UserStatsUseCase:
    """Account totals and active users per built-in role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> dict[str, Any]:
        async with self._uow_factory() as uow:
            total = await uow.users.count()
            active = await uow.users.count(is_active=True)
            per_role = {
                f"{role}_users": await uow.users.count_active_by_role(role)
                for role in (HierarchyRole.ADMIN, HierarchyRole.MANAGER, HierarchyRole.STAFF)
            }

        return {
            "total_users": total,
            "active_users": active,
            "inactive_users": total - active,
            **per_role,
        }
