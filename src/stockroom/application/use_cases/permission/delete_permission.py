"""Delete permission use case."""

from uuid import UUID

from stockroom.domain.entities import Permission
from stockroom.domain.exceptions import Conflict, NotFound


class DeletePermissionUseCase:
    """Delete a custom permission that no role references."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: UUID) -> Permission:
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission", str(permission_id))
            if permission.is_system:
                raise Conflict("Cannot delete system permissions")

            roles_using = await uow.permissions.count_roles_using(permission.id)
            if roles_using > 0:
                raise Conflict(
                    f"Cannot delete permission. It is assigned to {roles_using} roles"
                )
            await uow.permissions.delete(permission.id)

        return permission
