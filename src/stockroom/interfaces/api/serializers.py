"""JSON shapes for catalog entities."""

from datetime import datetime

from stockroom.domain.entities import Permission, Role, User


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def permission_to_dict(p: Permission) -> dict:
    return {
        "id": str(p.id),
        "name": p.name,
        "full_name": p.full_name,
        "resource": p.resource,
        "action": str(p.action),
        "category": str(p.category),
        "level": p.level,
        "description": p.description,
        "is_active": p.is_active,
        "is_system": p.is_system,
        "created_at": _iso(p.created_at),
        "updated_at": _iso(p.updated_at),
    }


def role_to_dict(r: Role, permissions: list[Permission] | None = None) -> dict:
    """Role body; ``permissions`` replaces the bare id list when given."""
    body = {
        "id": str(r.id),
        "name": r.name,
        "level": r.level,
        "description": r.description,
        "is_default": r.is_default,
        "is_active": r.is_active,
        "color": r.color,
        "user_count": r.user_count,
        "permission_count": r.permission_count,
        "created_by": r.created_by,
        "created_at": _iso(r.created_at),
        "updated_at": _iso(r.updated_at),
    }
    if permissions is None:
        body["permission_ids"] = sorted(str(pid) for pid in r.permission_ids)
    else:
        body["permissions"] = [permission_to_dict(p) for p in permissions]
    return body


def user_to_dict(u: User) -> dict:
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "role": u.role,
        "is_active": u.is_active,
        "store_id": u.store_id,
        "created_at": _iso(u.created_at),
        "updated_at": _iso(u.updated_at),
    }
