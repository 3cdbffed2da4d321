"""Clone role use case."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from stockroom.application.dto.role_dto import validate_role_fields
from stockroom.application.use_cases.role.role_catalog import refresh_user_count
from stockroom.domain.entities import Role
from stockroom.domain.exceptions import Conflict, NotFound


class CloneRoleUseCase:
    """Copy a role's permissions, level and color under a new name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        role_id: UUID,
        name: str,
        description: str | None = None,
    ) -> Role:
        validate_role_fields(name, description, None, None)
        name = name.strip()

        async with self._uow_factory() as uow:
            original = await uow.roles.get_by_id(role_id)
            if not original:
                raise NotFound("Role", str(role_id))
            if await uow.roles.get_by_name(name):
                raise Conflict("Role with this name already exists")

            now = datetime.now(UTC)
            clone = Role(
                id=uuid4(),
                name=name,
                level=original.level,
                description=description or f"{original.description or original.name} (Copy)",
                permission_ids=set(original.permission_ids),
                color=original.color,
                created_by=actor_id,
                created_at=now,
                updated_at=now,
            )
            await refresh_user_count(uow, clone)
            await uow.roles.create(clone)

        return clone
