"""Bulk mutation gate, pinned to role name."""

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

BULK_ROLES = frozenset({HierarchyRole.MANAGER.value, HierarchyRole.ADMIN.value})


class BulkOperationGate(Gate):
    """Allows managers and admins. Permission records are not consulted."""

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        denied = check_principal(context)
        if denied:
            return denied

        principal = context.principal
        if principal.role in BULK_ROLES:
            return ALLOW
        return deny(
            InsufficientRole(
                HierarchyRole.MANAGER,
                principal.role,
                "Bulk operations require manager or admin role",
            )
        )

    def __repr__(self) -> str:
        return "BulkOperationGate()"
