"""Default permission and role catalog installed on first start."""

from stockroom.domain.value_objects import PermissionAction as A
from stockroom.domain.value_objects import PermissionCategory as C

# name, description, category, resource, action, level
DEFAULT_PERMISSIONS: list[tuple[str, str, C, str, A, int]] = [
    ("View Users", "View user list and details", C.USERS, "users", A.READ, 1),
    ("Create Users", "Create new user accounts", C.USERS, "users", A.CREATE, 2),
    ("Update Users", "Update user information", C.USERS, "users", A.UPDATE, 2),
    ("Delete Users", "Delete user accounts", C.USERS, "users", A.DELETE, 3),
    ("Manage User Roles", "Assign and modify user roles", C.USERS, "users", A.MANAGE, 3),
    ("Toggle User Status", "Activate/deactivate users", C.USERS, "users", A.UPDATE, 2),
    ("View Roles", "View roles and permissions", C.USERS, "roles", A.READ, 1),
    ("Create Roles", "Create new roles", C.USERS, "roles", A.CREATE, 3),
    ("Update Roles", "Update role information and permissions", C.USERS, "roles", A.UPDATE, 3),
    ("Delete Roles", "Delete custom roles", C.USERS, "roles", A.DELETE, 3),
    ("View Products", "View product list and details", C.INVENTORY, "products", A.READ, 1),
    ("Create Products", "Add new products to inventory", C.INVENTORY, "products", A.CREATE, 2),
    ("Update Products", "Update product information", C.INVENTORY, "products", A.UPDATE, 2),
    ("Delete Products", "Remove products from inventory", C.INVENTORY, "products", A.DELETE, 3),
    ("Manage Stock", "Update product stock levels", C.INVENTORY, "products", A.UPDATE, 2),
    ("Export Inventory", "Export inventory data", C.INVENTORY, "products", A.EXPORT, 2),
    ("View Sales", "View sales transactions", C.SALES, "sales", A.READ, 1),
    ("Create Sales", "Process new sales transactions", C.SALES, "sales", A.CREATE, 1),
    ("Update Sales", "Modify sales transactions", C.SALES, "sales", A.UPDATE, 2),
    ("Delete Sales", "Cancel sales transactions", C.SALES, "sales", A.DELETE, 3),
    ("Process Refunds", "Process refunds and returns", C.SALES, "sales", A.UPDATE, 2),
    ("Export Sales", "Export sales reports", C.SALES, "sales", A.EXPORT, 2),
    ("View Stores", "View store information", C.STORES, "stores", A.READ, 1),
    ("Create Stores", "Add new stores", C.STORES, "stores", A.CREATE, 3),
    ("Update Stores", "Update store information", C.STORES, "stores", A.UPDATE, 3),
    ("Delete Stores", "Remove stores", C.STORES, "stores", A.DELETE, 3),
    ("View Analytics", "View dashboard and analytics", C.ANALYTICS, "analytics", A.READ, 1),
    ("View Reports", "Generate and view reports", C.REPORTS, "reports", A.READ, 2),
    ("Export Reports", "Export reports to various formats", C.REPORTS, "reports", A.EXPORT, 2),
    ("Advanced Analytics", "Access advanced analytics features", C.ANALYTICS, "analytics", A.MANAGE, 3),
    ("View Settings", "View system settings", C.SETTINGS, "settings", A.READ, 2),
    ("Update Settings", "Modify system settings", C.SETTINGS, "settings", A.UPDATE, 3),
    ("System Configuration", "Configure system parameters", C.SETTINGS, "settings", A.MANAGE, 3),
    ("View System Logs", "View system activity logs", C.SYSTEM, "logs", A.READ, 3),
    ("Manage System", "Perform system maintenance", C.SYSTEM, "system", A.MANAGE, 3),
    ("Backup System", "Create system backups", C.SYSTEM, "system", A.MANAGE, 3),
]

# role name -> resource -> granted actions; None grants the whole catalog
DEFAULT_ROLE_GRANTS: dict[str, dict[str, set[A]] | None] = {
    "admin": None,
    "manager": {
        "products": {A.READ, A.CREATE, A.UPDATE, A.EXPORT},
        "sales": {A.READ, A.CREATE, A.UPDATE, A.EXPORT},
        "users": {A.READ, A.UPDATE},
        "roles": {A.READ},
        "stores": {A.READ, A.UPDATE},
        "analytics": {A.READ},
        "reports": {A.READ, A.EXPORT},
        "settings": {A.READ},
    },
    "staff": {
        "products": {A.READ},
        "sales": {A.READ, A.CREATE},
        "stores": {A.READ},
        "analytics": {A.READ},
    },
}

# name, description, level, color
DEFAULT_ROLES: list[tuple[str, str, int, str]] = [
    ("admin", "Full system access with all permissions", 10, "#DC2626"),
    ("manager", "Management level access with most permissions", 5, "#2563EB"),
    ("staff", "Basic staff access for daily operations", 1, "#059669"),
]
