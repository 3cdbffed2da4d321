"""Authorization facade - binds protected operations to gate pipelines."""

from enum import StrEnum
from typing import Any

from stockroom.application.authorization.bulk_operation_gate import BulkOperationGate
from stockroom.application.authorization.decision import GateDecision
from stockroom.application.authorization.deletion_invariant_gate import (
    DeletionInvariantGate,
)
from stockroom.application.authorization.granular_permission_gate import (
    GranularPermissionGate,
)
from stockroom.application.authorization.pipeline import AuthorizationPipeline
from stockroom.application.authorization.resource_method_gate import ResourceMethodGate
from stockroom.application.authorization.role_hierarchy_gate import RoleHierarchyGate
from stockroom.application.authorization.store_scope_gate import StoreScopeGate
from stockroom.application.ports import AuditSink
from stockroom.domain.principal import Principal, PrincipalContext
from stockroom.domain.value_objects import HierarchyRole


class Operation(StrEnum):
    """Protected operations exposed by the route layer."""

    ME_PERMISSIONS = "me.permissions"
    ROLES_READ = "roles.read"
    ROLES_STATS = "roles.stats"
    ROLES_WRITE = "roles.write"
    ROLES_DELETE = "roles.delete"
    PERMISSIONS_READ = "permissions.read"
    PERMISSIONS_STATS = "permissions.stats"
    PERMISSIONS_WRITE = "permissions.write"
    USERS_LIST = "users.list"
    USERS_READ = "users.read"
    USERS_STATS = "users.stats"
    USERS_WRITE = "users.write"
    USERS_BULK = "users.bulk"
    USERS_DELETE = "users.delete"


class AuthorizationFacade:
    """Composes gates into a fixed pipeline per operation.

    Successful authorizations are reported to the audit sink; denials are
    raised to the caller with their specific error.
    """

    def __init__(self, unit_of_work_factory: type, audit_sink: AuditSink | None = None) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit_sink = audit_sink

        staff = RoleHierarchyGate(HierarchyRole.STAFF)
        manager = RoleHierarchyGate(HierarchyRole.MANAGER)
        admin = RoleHierarchyGate(HierarchyRole.ADMIN)
        store_scope = StoreScopeGate()

        bindings = {
            Operation.ME_PERMISSIONS: (staff,),
            Operation.ROLES_READ: (staff,),
            Operation.ROLES_STATS: (manager,),
            Operation.ROLES_WRITE: (manager,),
            Operation.ROLES_DELETE: (admin,),
            Operation.PERMISSIONS_READ: (staff,),
            Operation.PERMISSIONS_STATS: (manager,),
            Operation.PERMISSIONS_WRITE: (admin,),
            Operation.USERS_LIST: (staff, store_scope),
            Operation.USERS_READ: (staff,),
            Operation.USERS_STATS: (manager,),
            Operation.USERS_WRITE: (manager,),
            Operation.USERS_BULK: (BulkOperationGate(), store_scope),
            Operation.USERS_DELETE: (DeletionInvariantGate(unit_of_work_factory),),
        }
        self._pipelines = {
            operation: AuthorizationPipeline(operation, gates)
            for operation, gates in bindings.items()
        }

    def pipeline(self, operation: str) -> AuthorizationPipeline:
        """Get the pipeline bound to an operation."""
        try:
            return self._pipelines[Operation(operation)]
        except ValueError:
            raise KeyError(f"No pipeline bound to operation '{operation}'") from None

    def for_resource(self, resource: str, action: str | None = None) -> AuthorizationPipeline:
        """Pipeline for a resource check: verb-derived when ``action`` is None."""
        if action is None:
            gate = ResourceMethodGate(self._uow_factory, resource)
            name = f"{resource}:<method>"
        else:
            gate = GranularPermissionGate(self._uow_factory, resource, action)
            name = f"{resource}:{action}"
        return AuthorizationPipeline(name, (gate, StoreScopeGate()))

    async def is_allowed(self, operation: str, context: PrincipalContext) -> bool:
        return await self.pipeline(operation).allow(context)

    async def authorize(
        self, operation: str, context: PrincipalContext, **details: Any
    ) -> Principal:
        """Run the operation's pipeline; raise the first denial, audit success."""
        return await self.run(self.pipeline(operation), context, **details)

    async def run(
        self, pipeline: AuthorizationPipeline, context: PrincipalContext, **details: Any
    ) -> Principal:
        decision = await self.decide(pipeline, context, **details)
        if not decision.allowed:
            raise decision.error
        return context.principal

    async def decide(
        self, pipeline: AuthorizationPipeline, context: PrincipalContext, **details: Any
    ) -> GateDecision:
        """Evaluate without raising denials; successes are still audited."""
        decision = await pipeline.evaluate(context)
        if not decision.allowed:
            return decision
        if self._audit_sink is not None:
            await self._audit_sink.record(
                context.principal,
                pipeline.operation,
                {
                    "method": context.method,
                    "target_user_id": context.target_user_id,
                    "target_store_id": context.target_store_id,
                    **details,
                },
            )
        return decision
