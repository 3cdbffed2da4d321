"""Permission actions and HTTP verb mapping."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions a permission can grant on a resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"
    VIEW = "view"
    EXPORT = "export"
    IMPORT = "import"


METHOD_ACTIONS: dict[str, PermissionAction] = {
    "GET": PermissionAction.READ,
    "POST": PermissionAction.CREATE,
    "PUT": PermissionAction.UPDATE,
    "PATCH": PermissionAction.UPDATE,
    "DELETE": PermissionAction.DELETE,
}
