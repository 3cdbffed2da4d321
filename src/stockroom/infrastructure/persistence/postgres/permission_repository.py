"""PostgreSQL permission repository implementation."""

from __future__ import annotations

from uuid import UUID

from psycopg import AsyncConnection

from stockroom.domain.entities import Permission
from stockroom.domain.value_objects import PermissionAction, PermissionCategory

_COLUMNS = (
    "id, name, resource, action, category, level, description, "
    "is_active, is_system, created_at, updated_at"
)


def _row_to_permission(r: tuple) -> Permission:
    return Permission(
        id=r[0],
        name=r[1],
        resource=r[2],
        action=PermissionAction(r[3]),
        category=PermissionCategory(r[4]),
        level=r[5],
        description=r[6],
        is_active=r[7],
        is_system=r[8],
        created_at=r[9],
        updated_at=r[10],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def get_by_name(self, name: str) -> Permission | None:
        """Get permission by unique name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def get_many(self, permission_ids: list[UUID]) -> list[Permission]:
        """Get permissions by ids; missing ids are skipped."""
        if not permission_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE id = ANY(%s)",
            (list(permission_ids),),
        )
        return [_row_to_permission(r) for r in await cur.fetchall()]

    async def list(
        self,
        *,
        category: str | None = None,
        resource: str | None = None,
        is_active: bool | None = None,
    ) -> list[Permission]:
        """List permissions with optional filters."""
        conditions = []
        params: list[object] = []
        if category is not None:
            conditions.append("category = %s")
            params.append(str(category))
        if resource is not None:
            conditions.append("resource = %s")
            params.append(resource)
        if is_active is not None:
            conditions.append("is_active = %s")
            params.append(is_active)
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission{where} "
            "ORDER BY category, resource, action, name",
            tuple(params),
        )
        return [_row_to_permission(r) for r in await cur.fetchall()]

    async def list_active(self) -> list[Permission]:
        """List active permissions."""
        return await self.list(is_active=True)

    async def list_by_category(self, category: str) -> list[Permission]:
        """List active permissions in a category."""
        return await self.list(category=category, is_active=True)

    async def list_for_role(self, role_id: UUID) -> list[Permission]:
        """Permissions attached to a role, active or not."""
        cur = await self._conn.execute(
            f"SELECT {', '.join('p.' + c.strip() for c in _COLUMNS.split(','))} "
            "FROM permission p JOIN role_permission rp ON rp.permission_id = p.id "
            "WHERE rp.role_id = %s",
            (role_id,),
        )
        return [_row_to_permission(r) for r in await cur.fetchall()]

    async def create(self, permission: Permission) -> Permission:
        """Create permission."""
        await self._conn.execute(
            f"INSERT INTO permission ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                permission.id,
                permission.name,
                permission.resource,
                str(permission.action),
                str(permission.category),
                permission.level,
                permission.description,
                permission.is_active,
                permission.is_system,
                permission.created_at,
                permission.updated_at,
            ),
        )
        return permission

    async def update(self, permission: Permission) -> None:
        """Update permission."""
        await self._conn.execute(
            "UPDATE permission SET name=%s, resource=%s, action=%s, category=%s, level=%s, "
            "description=%s, is_active=%s, updated_at=%s WHERE id=%s",
            (
                permission.name,
                permission.resource,
                str(permission.action),
                str(permission.category),
                permission.level,
                permission.description,
                permission.is_active,
                permission.updated_at,
                permission.id,
            ),
        )

    async def delete(self, permission_id: UUID) -> None:
        """Delete permission."""
        await self._conn.execute(
            "DELETE FROM permission WHERE id = %s",
            (permission_id,),
        )

    async def count_roles_using(self, permission_id: UUID) -> int:
        """Count roles whose permission set includes this permission."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM role_permission WHERE permission_id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return r[0]
