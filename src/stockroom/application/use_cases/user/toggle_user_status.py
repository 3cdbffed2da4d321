"""Toggle user status use case."""

from datetime import UTC, datetime

from stockroom.application.use_cases.user.admin_guard import (
    ensure_admins_remain,
    is_active_admin,
)
from stockroom.domain.entities import User
from stockroom.domain.exceptions import NotFound


class ToggleUserStatusUseCase:
    """Flip a user's active flag; the last active admin cannot be deactivated."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            if is_active_admin(user):
                await ensure_admins_remain(uow, 1, "Cannot deactivate the last admin user")

            user.is_active = not user.is_active
            user.updated_at = datetime.now(UTC)
            await uow.users.update(user)

        return user
