"""Permission categories."""

from enum import StrEnum


class PermissionCategory(StrEnum):
    """Grouping used to browse the permission catalog."""

    INVENTORY = "inventory"
    SALES = "sales"
    USERS = "users"
    STORES = "stores"
    ANALYTICS = "analytics"
    SETTINGS = "settings"
    REPORTS = "reports"
    SYSTEM = "system"
