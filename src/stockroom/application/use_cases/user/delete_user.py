"""Delete user use case."""

from stockroom.domain.entities import User
from stockroom.domain.exceptions import LastAdminProtected, NotFound
from stockroom.domain.value_objects import HierarchyRole


class DeleteUserUseCase:
    """Delete a user account.

    Runs after DeletionInvariantGate and repeats the last-admin check, which
    also covers an admin deleting their own account.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            if user.role == HierarchyRole.ADMIN:
                if await uow.users.count_active_admins() <= 1:
                    raise LastAdminProtected("Cannot delete the last admin user")
            await uow.users.delete(user.id)

        return user
