"""Store partitioning gate."""

from stockroom.application.authorization.decision import (
    ALLOW,
    Gate,
    GateDecision,
    check_principal,
    deny,
)
from stockroom.domain.exceptions import ScopeViolation
from stockroom.domain.principal import PrincipalContext
from stockroom.domain.value_objects import HierarchyRole

SCOPED_ROLES = frozenset({HierarchyRole.MANAGER.value, HierarchyRole.STAFF.value})


class StoreScopeGate(Gate):
    """Keeps managers and staff inside their assigned store.

    A request without a target store is treated as not store-scoped and is
    allowed. Roles outside the built-in hierarchy are never matched to a
    store.
    """

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        denied = check_principal(context)
        if denied:
            return denied

        principal = context.principal
        if principal.is_superuser():
            return ALLOW

        store_id = context.target_store_id
        if not store_id:
            return ALLOW

        if (
            principal.role in SCOPED_ROLES
            and principal.store_id is not None
            and principal.store_id == store_id
        ):
            return ALLOW
        return deny(ScopeViolation(store_id))

    def __repr__(self) -> str:
        return "StoreScopeGate()"
