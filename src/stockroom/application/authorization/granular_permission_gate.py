"""Exact resource:action permission gate."""

from stockroom.application.authorization.decision import (
    ALLOW,
    Gate,
    GateDecision,
    check_principal,
    deny,
)
from stockroom.application.authorization.role_permissions import resolve_role_permissions
from stockroom.domain.exceptions import PermissionDenied
from stockroom.domain.principal import PrincipalContext


class GranularPermissionGate(Gate):
    """Allows when the caller's role holds an active ``resource:action`` permission.

    No wildcard and no hierarchy fallback.
    """

    def __init__(self, unit_of_work_factory: type, resource: str, action: str) -> None:
        self._uow_factory = unit_of_work_factory
        self.resource = resource
        self.action = action

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        denied = check_principal(context)
        if denied:
            return denied

        principal = context.principal
        if principal.is_superuser():
            return ALLOW

        permissions = await resolve_role_permissions(self._uow_factory, principal.role)
        if permissions is None:
            return deny(
                PermissionDenied(self.resource, self.action, "Invalid user role")
            )

        if any(p.grants(self.resource, self.action) for p in permissions):
            return ALLOW
        return deny(PermissionDenied(self.resource, self.action))

    def __repr__(self) -> str:
        return f"GranularPermissionGate({self.resource!r}, {self.action!r})"
