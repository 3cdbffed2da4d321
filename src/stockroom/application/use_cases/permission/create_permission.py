"""Create permission use cases."""

from datetime import UTC, datetime
from uuid import uuid4

from stockroom.application.dto.permission_dto import (
    PermissionCreateInput,
    parse_action,
    parse_category,
    validate_permission_fields,
)
from stockroom.domain.entities import Permission
from stockroom.domain.exceptions import Conflict, ValidationError


def _build(data: PermissionCreateInput, now: datetime) -> Permission:
    if not (data.name and data.category and data.resource and data.action):
        raise ValidationError("Name, category, resource, and action are required")
    validate_permission_fields(data.name, data.resource, data.level)
    return Permission(
        id=uuid4(),
        name=data.name.strip(),
        resource=data.resource.strip(),
        action=parse_action(data.action),
        category=parse_category(data.category),
        level=data.level,
        description=data.description,
        is_system=data.is_system,
        created_at=now,
        updated_at=now,
    )


class CreatePermissionUseCase:
    """Add one permission to the catalog."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, data: PermissionCreateInput) -> Permission:
        permission = _build(data, datetime.now(UTC))
        async with self._uow_factory() as uow:
            if await uow.permissions.get_by_name(permission.name):
                raise Conflict("Permission with this name already exists")
            await uow.permissions.create(permission)
        return permission


class BulkCreatePermissionsUseCase:
    """Add several permissions at once; nothing is created if any entry is invalid."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, items: list[PermissionCreateInput]) -> list[Permission]:
        if not items:
            raise ValidationError("Permissions array is required")

        now = datetime.now(UTC)
        errors = []
        permissions = []
        for i, data in enumerate(items, start=1):
            try:
                permissions.append(_build(data, now))
            except ValidationError as e:
                errors.append(f"Permission {i}: {e}")
        if errors:
            raise ValidationError("; ".join(errors))

        names = [p.name for p in permissions]
        if len(set(names)) != len(names):
            raise ValidationError("Duplicate permission names in request")

        async with self._uow_factory() as uow:
            existing = [n for n in names if await uow.permissions.get_by_name(n)]
            if existing:
                raise Conflict(f"Some permissions already exist: {', '.join(existing)}")
            for permission in permissions:
                await uow.permissions.create(permission)

        return permissions
