"""Role DTOs."""

import re
from dataclasses import dataclass, field
from uuid import UUID

from stockroom.domain.exceptions import ValidationError

COLOR_PATTERN = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)
ROLE_NAME_MAX = 50
DESCRIPTION_MAX = 500


@dataclass
class RoleCreateInput:
    """Input for creating a role."""

    name: str
    description: str | None = None
    permission_ids: list[UUID] = field(default_factory=list)
    level: int = 1
    color: str | None = None
    is_default: bool = False


@dataclass
class RoleUpdateInput:
    """Partial update for a role. ``None`` leaves a field unchanged."""

    name: str | None = None
    description: str | None = None
    permission_ids: list[UUID] | None = None
    level: int | None = None
    color: str | None = None
    is_active: bool | None = None


def validate_role_fields(
    name: str | None,
    description: str | None,
    level: int | None,
    color: str | None,
) -> None:
    """Check the role catalog field constraints."""
    if name is not None:
        if not name.strip():
            raise ValidationError("Role name is required")
        if len(name.strip()) > ROLE_NAME_MAX:
            raise ValidationError(f"Role name cannot exceed {ROLE_NAME_MAX} characters")
    if description is not None and len(description) > DESCRIPTION_MAX:
        raise ValidationError(f"Description cannot exceed {DESCRIPTION_MAX} characters")
    if level is not None and not 1 <= level <= 10:
        raise ValidationError("Role level must be between 1 and 10")
    if color is not None and not COLOR_PATTERN.match(color):
        raise ValidationError("Invalid color format")
