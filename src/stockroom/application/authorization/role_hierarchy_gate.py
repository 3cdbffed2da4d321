"""Coarse gate over the fixed staff/manager/admin hierarchy."""

from stockroom.application.authorization.decision import (
    ALLOW,
    Gate,
    GateDecision,
    check_principal,
    deny,
)
from stockroom.domain.exceptions import InsufficientRole
from stockroom.domain.principal import PrincipalContext
from stockroom.domain.value_objects import HierarchyRole


class RoleHierarchyGate(Gate):
    """Allows when the caller's hierarchy weight reaches ``required_role``.

    Never reads the role catalog. Requests that target another user's id
    additionally need manager weight.
    """

    def __init__(self, required_role: str) -> None:
        self.required_role = required_role

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        denied = check_principal(context)
        if denied:
            return denied

        principal = context.principal
        if principal.is_superuser():
            return ALLOW

        if principal.weight < HierarchyRole.weight_of(self.required_role):
            return deny(InsufficientRole(self.required_role, principal.role))

        if context.targets_other_user and principal.weight < HierarchyRole.MANAGER.weight:
            return deny(
                InsufficientRole(
                    HierarchyRole.MANAGER,
                    principal.role,
                    "Only managers and admins can modify other users",
                )
            )

        return ALLOW

    def __repr__(self) -> str:
        return f"RoleHierarchyGate({self.required_role!r})"
