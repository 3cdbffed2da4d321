"""User repository port."""

from __future__ import annotations

from typing import Any, Protocol

from stockroom.domain.entities import User


class UserRepository(Protocol):
    """Port for user accounts."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_many(self, user_ids: list[str]) -> list[User]: ...

    async def list(
        self,
        *,
        store_id: str | None = None,
        role: str | None = None,
        is_active: bool | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[User]: ...

    async def count_active_admins(self) -> int: ...

    async def count_active_by_role(self, role: str) -> int: ...

    async def count(self, *, is_active: bool | None = None) -> int: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...

    async def delete(self, user_id: str) -> None: ...

    async def bulk_update(self, user_ids: list[str], updates: dict[str, Any]) -> int: ...

    async def reassign_role(self, old_name: str, new_name: str) -> int: ...
