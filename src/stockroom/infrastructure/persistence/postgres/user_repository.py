"""PostgreSQL user repository implementation."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from psycopg import AsyncConnection

from stockroom.domain.entities import User
from stockroom.infrastructure.persistence.postgres.sql import contains_pattern

_COLUMNS = "id, name, email, role, is_active, store_id, created_at, updated_at"
_BULK_COLUMNS = {"role": "role", "is_active": "is_active", "store_id": "store_id"}


def _row_to_user(r: tuple) -> User:
    return User(
        id=r[0],
        name=r[1],
        email=r[2],
        role=r[3],
        is_active=r[4],
        store_id=r[5],
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresUserRepository:
    """User repository implementation. Role is stored by name, not by key."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_many(self, user_ids: list[str]) -> list[User]:
        """Get users by ids; missing ids are skipped."""
        if not user_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = ANY(%s)",
            (list(user_ids),),
        )
        return [_row_to_user(r) for r in await cur.fetchall()]

    async def list(
        self,
        *,
        store_id: str | None = None,
        role: str | None = None,
        is_active: bool | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[User]:
        """List users with optional filters.

        ``search`` matches name or email case-insensitively. Without ``limit``
        every matching row is returned.
        """
        conditions = []
        params: list[object] = []
        if store_id is not None:
            conditions.append("store_id = %s")
            params.append(store_id)
        if role is not None:
            conditions.append("role = %s")
            params.append(role)
        if is_active is not None:
            conditions.append("is_active = %s")
            params.append(is_active)
        if search:
            conditions.append("(name ILIKE %s OR email ILIKE %s)")
            pattern = contains_pattern(search)
            params.extend([pattern, pattern])
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        page = ""
        if limit is not None:
            page = " LIMIT %s OFFSET %s"
            params.extend([limit, offset])
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user{where} ORDER BY name, id{page}",
            tuple(params),
        )
        return [_row_to_user(r) for r in await cur.fetchall()]

    async def count_active_admins(self) -> int:
        """Count active users holding the admin role name."""
        return await self.count_active_by_role("admin")

    async def count_active_by_role(self, role: str) -> int:
        """Count active users holding a role name."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM app_user WHERE role = %s AND is_active",
            (role,),
        )
        r = await cur.fetchone()
        return r[0]

    async def count(self, *, is_active: bool | None = None) -> int:
        """Count users, optionally by active flag."""
        if is_active is None:
            cur = await self._conn.execute("SELECT count(*) FROM app_user")
        else:
            cur = await self._conn.execute(
                "SELECT count(*) FROM app_user WHERE is_active = %s",
                (is_active,),
            )
        r = await cur.fetchone()
        return r[0]

    async def create(self, user: User) -> User:
        """Create user."""
        await self._conn.execute(
            f"INSERT INTO app_user ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.name,
                user.email,
                user.role,
                user.is_active,
                user.store_id,
                user.created_at,
                user.updated_at,
            ),
        )
        return user

    async def update(self, user: User) -> None:
        """Update user."""
        await self._conn.execute(
            "UPDATE app_user SET name=%s, email=%s, role=%s, is_active=%s, store_id=%s, "
            "updated_at=%s WHERE id=%s",
            (
                user.name,
                user.email,
                user.role,
                user.is_active,
                user.store_id,
                user.updated_at,
                user.id,
            ),
        )

    async def delete(self, user_id: str) -> None:
        """Delete user."""
        await self._conn.execute("DELETE FROM app_user WHERE id = %s", (user_id,))

    async def bulk_update(self, user_ids: list[str], updates: dict[str, Any]) -> int:
        """Apply the same updates to many users; returns rows changed."""
        assignments = []
        params: list[object] = []
        for key, value in updates.items():
            assignments.append(f"{_BULK_COLUMNS[key]} = %s")
            params.append(value)
        assignments.append("updated_at = %s")
        params.append(datetime.now(UTC))
        params.append(list(user_ids))
        cur = await self._conn.execute(
            f"UPDATE app_user SET {', '.join(assignments)} WHERE id = ANY(%s)",
            tuple(params),
        )
        return cur.rowcount

    async def reassign_role(self, old_name: str, new_name: str) -> int:
        """Move every user holding ``old_name`` to ``new_name``."""
        cur = await self._conn.execute(
            "UPDATE app_user SET role = %s, updated_at = %s WHERE role = %s",
            (new_name, datetime.now(UTC), old_name),
        )
        return cur.rowcount
