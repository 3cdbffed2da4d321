"""Role -> permission resolution shared by the catalog-backed gates."""

from stockroom.application.authorization.decision import catalog_lookup
from stockroom.domain.entities import Permission


async def resolve_role_permissions(
    unit_of_work_factory: type, role_name: str
) -> list[Permission] | None:
    """Load the named role's permission set, or None if the role does not exist.

    Read fresh on every call; nothing is cached on the principal.
    """
    with catalog_lookup(f"role '{role_name}'"):
        async with unit_of_work_factory() as uow:
            role = await uow.roles.get_by_name(role_name)
            if role is None:
                return None
            return await uow.permissions.list_for_role(role.id)
