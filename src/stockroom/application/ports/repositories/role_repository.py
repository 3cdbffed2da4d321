"""Role repository port."""

from typing import Protocol
from uuid import UUID

from stockroom.domain.entities import Role


class RoleRepository(Protocol):
    """Port for the role catalog."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(
        self, *, search: str | None = None, limit: int | None = None, offset: int = 0
    ) -> list[Role]: ...

    async def list_default(self) -> list[Role]: ...

    async def list_up_to_level(self, level: int) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...
