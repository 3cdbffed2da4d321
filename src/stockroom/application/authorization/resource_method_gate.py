"""Resource gate that derives the action from the HTTP verb."""

from stockroom.application.authorization.decision import (
    ALLOW,
    Gate,
    GateDecision,
    check_principal,
    deny,
)
from stockroom.application.authorization.role_permissions import resolve_role_permissions
from stockroom.domain.exceptions import InvalidMethod, PermissionDenied
from stockroom.domain.principal import PrincipalContext
from stockroom.domain.value_objects import METHOD_ACTIONS, PermissionAction


def action_for_method(method: str) -> PermissionAction:
    """Map an HTTP verb to its action; unmapped verbs raise InvalidMethod."""
    action = METHOD_ACTIONS.get(method.upper())
    if action is None:
        raise InvalidMethod(method)
    return action


class ResourceMethodGate(Gate):
    """Like GranularPermissionGate, but a ``manage`` permission on the same
    resource satisfies every method.
    """

    def __init__(self, unit_of_work_factory: type, resource: str) -> None:
        self._uow_factory = unit_of_work_factory
        self.resource = resource

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        denied = check_principal(context)
        if denied:
            return denied

        action = action_for_method(context.method)

        principal = context.principal
        if principal.is_superuser():
            return ALLOW

        permissions = await resolve_role_permissions(self._uow_factory, principal.role)
        if permissions is None:
            return deny(PermissionDenied(self.resource, action, "Invalid user role"))

        for permission in permissions:
            if permission.grants(self.resource, action) or permission.grants(
                self.resource, PermissionAction.MANAGE
            ):
                return ALLOW
        return deny(PermissionDenied(self.resource, action))

    def __repr__(self) -> str:
        return f"ResourceMethodGate({self.resource!r})"
