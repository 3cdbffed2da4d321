"""Create role use case."""

from datetime import UTC, datetime
from uuid import uuid4

from stockroom.application.dto.role_dto import RoleCreateInput, validate_role_fields
from stockroom.application.use_cases.role.role_catalog import (
    ensure_active_permissions,
    refresh_user_count,
)
from stockroom.domain.entities import Role
from stockroom.domain.entities.role import DEFAULT_ROLE_COLOR
from stockroom.domain.exceptions import Conflict


class CreateRoleUseCase:
    """Create a role with a validated permission set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, data: RoleCreateInput) -> Role:
        validate_role_fields(data.name, data.description, data.level, data.color)
        name = data.name.strip()

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise Conflict("Role with this name already exists")
            await ensure_active_permissions(uow, data.permission_ids)

            now = datetime.now(UTC)
            role = Role(
                id=uuid4(),
                name=name,
                level=data.level,
                description=data.description,
                permission_ids=set(data.permission_ids),
                is_default=data.is_default,
                color=data.color or DEFAULT_ROLE_COLOR,
                created_by=actor_id,
                created_at=now,
                updated_at=now,
            )
            await refresh_user_count(uow, role)
            await uow.roles.create(role)

        return role
