"""Account deletion gate with the last-admin invariant."""

from stockroom.application.authorization.decision import (
    ALLOW,
    Gate,
    GateDecision,
    catalog_lookup,
    check_principal,
    deny,
)
from stockroom.domain.exceptions import InsufficientRole, LastAdminProtected
from stockroom.domain.principal import PrincipalContext
from stockroom.domain.value_objects import HierarchyRole


class DeletionInvariantGate(Gate):
    """Users may delete themselves; only admins may delete others.

    Deleting an admin is refused while one or fewer admins are active. The
    count and the deletion are not atomic: two concurrent deletions of the
    last two admins can both pass this check.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        denied = check_principal(context)
        if denied:
            return denied

        principal = context.principal
        target_id = context.target_user_id
        if target_id == principal.user_id:
            return ALLOW

        if not principal.is_superuser():
            return deny(
                InsufficientRole(
                    HierarchyRole.ADMIN,
                    principal.role,
                    "Only admins can delete other users",
                )
            )

        if target_id is None:
            return ALLOW

        with catalog_lookup(f"user '{target_id}'"):
            async with self._uow_factory() as uow:
                target = await uow.users.get_by_id(target_id)
                if target and target.role == HierarchyRole.ADMIN:
                    admin_count = await uow.users.count_active_admins()
                    if admin_count <= 1:
                        return deny(LastAdminProtected())
        return ALLOW

    def __repr__(self) -> str:
        return "DeletionInvariantGate()"
