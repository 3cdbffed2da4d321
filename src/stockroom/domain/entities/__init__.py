"""Domain entities."""

from stockroom.domain.entities.permission import Permission
from stockroom.domain.entities.role import Role
from stockroom.domain.entities.user import User

__all__ = [
    "Permission",
    "Role",
    "User",
]
