"""Delete role use case."""

from uuid import UUID

from stockroom.domain.entities import Role
from stockroom.domain.exceptions import Conflict, NotFound


class DeleteRoleUseCase:
    """Delete a custom role that no active user holds."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))
            if role.is_default:
                raise Conflict("Cannot delete default roles")

            holders = await uow.users.count_active_by_role(role.name)
            if holders > 0:
                raise Conflict(
                    f"Cannot delete role. {holders} users are currently assigned to this role"
                )
            await uow.roles.delete(role.id)

        return role
