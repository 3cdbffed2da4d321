"""Permission entity - one action on one resource."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from stockroom.domain.value_objects import PermissionAction, PermissionCategory


@dataclass
class Permission:
    """Permission - grants ``action`` on ``resource``. Name is unique, the pair is not."""

    id: UUID
    name: str
    resource: str
    action: PermissionAction
    category: PermissionCategory
    level: int = 1
    description: str | None = None
    is_active: bool = True
    is_system: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.resource}:{self.action}"

    def grants(self, resource: str, action: str) -> bool:
        """Exact, active match only."""
        return self.is_active and self.resource == resource and self.action == action
