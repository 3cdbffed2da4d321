"""Domain value objects."""

from stockroom.domain.value_objects.hierarchy_role import HIERARCHY_WEIGHTS, HierarchyRole
from stockroom.domain.value_objects.permission_action import METHOD_ACTIONS, PermissionAction
from stockroom.domain.value_objects.permission_category import PermissionCategory

__all__ = [
    "HIERARCHY_WEIGHTS",
    "HierarchyRole",
    "METHOD_ACTIONS",
    "PermissionAction",
    "PermissionCategory",
]
