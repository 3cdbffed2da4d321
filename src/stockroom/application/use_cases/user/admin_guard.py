"""Last-admin guard shared by the user mutation use cases."""

from stockroom.domain.entities import User
from stockroom.domain.exceptions import LastAdminProtected
from stockroom.domain.value_objects import HierarchyRole


def is_active_admin(user: User) -> bool:
    return user.is_active and user.role == HierarchyRole.ADMIN


async def ensure_admins_remain(uow, removed: int, message: str) -> None:
    """Refuse when removing ``removed`` active admins would leave none.

    Count-then-write, not atomic with the caller's mutation.
    """
    if removed <= 0:
        return
    admin_count = await uow.users.count_active_admins()
    if admin_count - removed < 1:
        raise LastAdminProtected(message)
