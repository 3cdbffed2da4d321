"""Repository ports."""

from stockroom.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from stockroom.application.ports.repositories.role_repository import RoleRepository
from stockroom.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "PermissionRepository",
    "RoleRepository",
    "UserRepository",
]
