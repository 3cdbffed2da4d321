"""Permission statistics use case."""

from collections import Counter
from typing import Any


class PermissionStatsUseCase:
    """Catalog totals grouped by category and action."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> dict[str, Any]:
        async with self._uow_factory() as uow:
            permissions = await uow.permissions.list()

        active = sum(1 for p in permissions if p.is_active)
        system = sum(1 for p in permissions if p.is_system)
        by_category = Counter(str(p.category) for p in permissions)
        active_by_category = Counter(str(p.category) for p in permissions if p.is_active)
        by_action = Counter(str(p.action) for p in permissions)

        return {
            "total_permissions": len(permissions),
            "active_permissions": active,
            "inactive_permissions": len(permissions) - active,
            "system_permissions": system,
            "custom_permissions": len(permissions) - system,
            "category_stats": [
                {"category": c, "count": n, "active_count": active_by_category[c]}
                for c, n in by_category.most_common()
            ],
            "action_stats": [
                {"action": a, "count": n} for a, n in by_action.most_common()
            ],
        }
