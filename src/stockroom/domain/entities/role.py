"""Role entity for RBAC."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

DEFAULT_ROLE_COLOR = "#3B82F6"


@dataclass
class Role:
    """Role - named permission set with a catalog level (1-10).

    ``level`` is display/ordering data for the catalog and has no relation to
    the staff/manager/admin hierarchy weights. ``user_count`` is a cache
    refreshed when the role is saved.
    """

    id: UUID
    name: str
    level: int = 1
    description: str | None = None
    permission_ids: set[UUID] = field(default_factory=set)
    is_default: bool = False
    is_active: bool = True
    color: str = DEFAULT_ROLE_COLOR
    user_count: int = 0
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def permission_count(self) -> int:
        return len(self.permission_ids)
