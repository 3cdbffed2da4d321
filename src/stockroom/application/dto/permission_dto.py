"""Permission DTOs."""

from dataclasses import dataclass

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.value_objects import PermissionAction, PermissionCategory

PERMISSION_NAME_MAX = 100


@dataclass
class PermissionCreateInput:
    """Input for creating a permission."""

    name: str
    category: str
    resource: str
    action: str
    description: str | None = None
    level: int = 1
    is_system: bool = False


@dataclass
class PermissionUpdateInput:
    """Partial update for a permission. ``None`` leaves a field unchanged."""

    name: str | None = None
    description: str | None = None
    category: str | None = None
    resource: str | None = None
    action: str | None = None
    level: int | None = None
    is_active: bool | None = None


def parse_action(value: str) -> PermissionAction:
    try:
        return PermissionAction(value)
    except ValueError:
        raise ValidationError(f"Invalid permission action: {value}") from None


def parse_category(value: str) -> PermissionCategory:
    try:
        return PermissionCategory(value)
    except ValueError:
        raise ValidationError(f"Invalid permission category: {value}") from None


def validate_permission_fields(
    name: str | None, resource: str | None, level: int | None
) -> None:
    for label, value in (("name", name), ("resource", resource)):
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Permission {label} must be a string")
    if name is not None:
        if not name.strip():
            raise ValidationError("Permission name is required")
        if len(name.strip()) > PERMISSION_NAME_MAX:
            raise ValidationError(
                f"Permission name cannot exceed {PERMISSION_NAME_MAX} characters"
            )
    if resource is not None and not resource.strip():
        raise ValidationError("Permission resource is required")
    if level is not None and not 1 <= level <= 5:
        raise ValidationError("Permission level must be between 1 and 5")
