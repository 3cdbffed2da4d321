"""Authorization gates and the facade that composes them."""

from stockroom.application.authorization.bulk_operation_gate import BulkOperationGate
from stockroom.application.authorization.decision import ALLOW, Gate, GateDecision, deny
from stockroom.application.authorization.deletion_invariant_gate import (
    DeletionInvariantGate,
)
from stockroom.application.authorization.facade import AuthorizationFacade, Operation
from stockroom.application.authorization.granular_permission_gate import (
    GranularPermissionGate,
)
from stockroom.application.authorization.pipeline import AuthorizationPipeline
from stockroom.application.authorization.resource_method_gate import (
    ResourceMethodGate,
    action_for_method,
)
from stockroom.application.authorization.role_hierarchy_gate import RoleHierarchyGate
from stockroom.application.authorization.store_scope_gate import StoreScopeGate

__all__ = [
    "ALLOW",
    "AuthorizationFacade",
    "AuthorizationPipeline",
    "BulkOperationGate",
    "DeletionInvariantGate",
    "Gate",
    "GateDecision",
    "GranularPermissionGate",
    "Operation",
    "ResourceMethodGate",
    "RoleHierarchyGate",
    "StoreScopeGate",
    "action_for_method",
    "deny",
]
