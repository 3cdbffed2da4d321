"""Update permission use case."""

from datetime import UTC, datetime
from uuid import UUID

from stockroom.application.dto.permission_dto import (
    PermissionUpdateInput,
    parse_action,
    parse_category,
    validate_permission_fields,
)
from stockroom.domain.entities import Permission
from stockroom.domain.exceptions import Conflict, NotFound, ValidationError


class UpdatePermissionUseCase:
    """Update a permission. System permissions keep their identity fields.

    Flipping ``is_active`` takes effect on the next authorization decision.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: UUID, data: PermissionUpdateInput) -> Permission:
        validate_permission_fields(data.name, data.resource, data.level)
        action = parse_action(data.action) if data.action is not None else None
        category = parse_category(data.category) if data.category is not None else None

        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission", str(permission_id))

            changes_identity = (
                (data.name is not None and data.name.strip() != permission.name)
                or (category is not None and category != permission.category)
                or (data.resource is not None and data.resource.strip() != permission.resource)
                or (action is not None and action != permission.action)
            )
            if permission.is_system and changes_identity:
                raise ValidationError("Cannot modify system permission core properties")

            if data.name is not None and data.name.strip() != permission.name:
                if await uow.permissions.get_by_name(data.name.strip()):
                    raise Conflict("Permission with this name already exists")
                permission.name = data.name.strip()
            if data.description is not None:
                permission.description = data.description
            if category is not None:
                permission.category = category
            if data.resource is not None:
                permission.resource = data.resource.strip()
            if action is not None:
                permission.action = action
            if data.level is not None:
                permission.level = data.level
            if data.is_active is not None:
                permission.is_active = data.is_active

            permission.updated_at = datetime.now(UTC)
            await uow.permissions.update(permission)

        return permission
