"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from stockroom.domain.entities import Role
from stockroom.infrastructure.persistence.postgres.sql import contains_pattern

_SELECT = (
    "SELECT r.id, r.name, r.level, r.description, r.is_default, r.is_active, r.color, "
    "r.user_count, r.created_by, r.created_at, r.updated_at, "
    "COALESCE(array_agg(rp.permission_id) FILTER (WHERE rp.permission_id IS NOT NULL), '{}') "
    "FROM role r LEFT JOIN role_permission rp ON rp.role_id = r.id"
)
_GROUP = " GROUP BY r.id"


def _row_to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        level=r[2],
        description=r[3],
        is_default=r[4],
        is_active=r[5],
        color=r[6],
        user_count=r[7],
        created_by=r[8],
        created_at=r[9],
        updated_at=r[10],
        permission_ids=set(r[11]),
    )


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(_SELECT + " WHERE r.id = %s" + _GROUP, (role_id,))
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(_SELECT + " WHERE r.name = %s" + _GROUP, (name,))
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list_all(
        self, *, search: str | None = None, limit: int | None = None, offset: int = 0
    ) -> list[Role]:
        """List roles by level, optionally matching name or description."""
        where = ""
        params: list[object] = []
        if search:
            where = " WHERE (r.name ILIKE %s OR r.description ILIKE %s)"
            pattern = contains_pattern(search)
            params.extend([pattern, pattern])
        page = ""
        if limit is not None:
            page = " LIMIT %s OFFSET %s"
            params.extend([limit, offset])
        cur = await self._conn.execute(
            _SELECT + where + _GROUP + " ORDER BY r.level, r.name" + page, tuple(params)
        )
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def list_default(self) -> list[Role]:
        """List active default roles by level."""
        cur = await self._conn.execute(
            _SELECT + " WHERE r.is_default AND r.is_active" + _GROUP + " ORDER BY r.level"
        )
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def list_up_to_level(self, level: int) -> list[Role]:
        """List active roles with catalog level <= ``level``."""
        cur = await self._conn.execute(
            _SELECT + " WHERE r.level <= %s AND r.is_active" + _GROUP + " ORDER BY r.level",
            (level,),
        )
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def create(self, role: Role) -> Role:
        """Create role with its permission set."""
        await self._conn.execute(
            "INSERT INTO role (id, name, level, description, is_default, is_active, color, "
            "user_count, created_by, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.name,
                role.level,
                role.description,
                role.is_default,
                role.is_active,
                role.color,
                role.user_count,
                role.created_by,
                role.created_at,
                role.updated_at,
            ),
        )
        await self._set_permissions(role.id, role.permission_ids)
        return role

    async def update(self, role: Role) -> None:
        """Update role fields and replace its permission set."""
        await self._conn.execute(
            "UPDATE role SET name=%s, level=%s, description=%s, is_active=%s, color=%s, "
            "user_count=%s, updated_at=%s WHERE id=%s",
            (
                role.name,
                role.level,
                role.description,
                role.is_active,
                role.color,
                role.user_count,
                role.updated_at,
                role.id,
            ),
        )
        await self._set_permissions(role.id, role.permission_ids)

    async def delete(self, role_id: UUID) -> None:
        """Delete role; role_permission rows cascade."""
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    async def _set_permissions(self, role_id: UUID, permission_ids: set[UUID]) -> None:
        await self._conn.execute("DELETE FROM role_permission WHERE role_id = %s", (role_id,))
        for permission_id in permission_ids:
            await self._conn.execute(
                "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s)",
                (role_id, permission_id),
            )
