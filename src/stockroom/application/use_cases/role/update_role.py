"""Update role use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from stockroom.application.dto.role_dto import RoleUpdateInput, validate_role_fields
from stockroom.application.use_cases.role.role_catalog import (
    ensure_active_permissions,
    refresh_user_count,
)
from stockroom.domain.entities import Role
from stockroom.domain.exceptions import Conflict, NotFound, ValidationError

logger = logging.getLogger("stockroom.roles")


class UpdateRoleUseCase:
    """Update role fields and permission set.

    Renaming a role moves every user holding the old name to the new one in
    the same transaction, so users are never left pointing at a missing role.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID, data: RoleUpdateInput) -> Role:
        validate_role_fields(data.name, data.description, data.level, data.color)
        new_name = data.name.strip() if data.name is not None else None

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))

            renamed = new_name is not None and new_name != role.name
            if role.is_default and (
                renamed or (data.level is not None and data.level != role.level)
            ):
                raise ValidationError("Cannot modify default role name or level")

            if renamed and await uow.roles.get_by_name(new_name):
                raise Conflict("Role with this name already exists")

            if data.permission_ids is not None:
                await ensure_active_permissions(uow, data.permission_ids)

            old_name = role.name
            if renamed:
                role.name = new_name
            if data.description is not None:
                role.description = data.description
            if data.permission_ids is not None:
                role.permission_ids = set(data.permission_ids)
            if data.level is not None:
                role.level = data.level
            if data.color is not None:
                role.color = data.color
            if data.is_active is not None:
                role.is_active = data.is_active

            if renamed:
                moved = await uow.users.reassign_role(old_name, role.name)
                logger.info("Role %s renamed to %s, %d users migrated", old_name, role.name, moved)
            if renamed or data.permission_ids is not None:
                await refresh_user_count(uow, role)

            role.updated_at = datetime.now(UTC)
            await uow.roles.update(role)

        return role
