"""User entity - back office account."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """User account. ``role`` holds a role name matched against ``Role.name``."""

    id: str
    name: str
    email: str
    role: str
    is_active: bool = True
    store_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
