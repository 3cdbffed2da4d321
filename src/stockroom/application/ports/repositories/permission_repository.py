"""Permission repository port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from stockroom.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for the permission catalog."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def get_by_name(self, name: str) -> Permission | None: ...

    async def get_many(self, permission_ids: list[UUID]) -> list[Permission]: ...

    async def list(
        self,
        *,
        category: str | None = None,
        resource: str | None = None,
        is_active: bool | None = None,
    ) -> list[Permission]: ...

    async def list_active(self) -> list[Permission]: ...

    async def list_by_category(self, category: str) -> list[Permission]: ...

    async def list_for_role(self, role_id: UUID) -> list[Permission]: ...

    async def create(self, permission: Permission) -> Permission: ...

    async def update(self, permission: Permission) -> None: ...

    async def delete(self, permission_id: UUID) -> None: ...

    async def count_roles_using(self, permission_id: UUID) -> int: ...
