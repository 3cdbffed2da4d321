"""Pytest fixtures for Stockroom tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

import pytest

from stockroom.domain.entities import Permission, Role, User
from stockroom.domain.principal import Principal, PrincipalContext
from stockroom.domain.value_objects import PermissionAction, PermissionCategory


# --- Fake repositories ---


def _page(items: list, limit: int | None, offset: int) -> list:
    if limit is None:
        return items[offset:]
    return items[offset : offset + limit]


class FakePermissionRepository:
    """In-memory permission repository; the role join reads from the role repository."""

    def __init__(self, roles_repo: FakeRoleRepository | None = None) -> None:
        self._by_id: dict[UUID, Permission] = {}
        self._roles_repo = roles_repo

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        return self._by_id.get(permission_id)

    async def get_by_name(self, name: str) -> Permission | None:
        for p in self._by_id.values():
            if p.name == name:
                return p
        return None

    async def get_many(self, permission_ids: list[UUID]) -> list[Permission]:
        return [self._by_id[pid] for pid in permission_ids if pid in self._by_id]

    async def list(
        self,
        *,
        category: str | None = None,
        resource: str | None = None,
        is_active: bool | None = None,
    ) -> list[Permission]:
        items = list(self._by_id.values())
        if category is not None:
            items = [p for p in items if p.category == category]
        if resource is not None:
            items = [p for p in items if p.resource == resource]
        if is_active is not None:
            items = [p for p in items if p.is_active == is_active]
        return sorted(items, key=lambda p: (p.category, p.resource, p.action, p.name))

    async def list_active(self) -> list[Permission]:
        return await self.list(is_active=True)

    async def list_by_category(self, category: str) -> list[Permission]:
        return await self.list(category=category, is_active=True)

    async def list_for_role(self, role_id: UUID) -> list[Permission]:
        role = await self._roles_repo.get_by_id(role_id)
        if role is None:
            return []
        return [self._by_id[pid] for pid in role.permission_ids if pid in self._by_id]

    async def create(self, permission: Permission) -> Permission:
        self._by_id[permission.id] = permission
        return permission

    async def update(self, permission: Permission) -> None:
        self._by_id[permission.id] = permission

    async def delete(self, permission_id: UUID) -> None:
        self._by_id.pop(permission_id, None)

    async def count_roles_using(self, permission_id: UUID) -> int:
        return sum(1 for r in await self._roles_repo.list_all() if permission_id in r.permission_ids)

    def add(self, permission: Permission) -> Permission:
        """Helper to add permission for tests."""
        self._by_id[permission.id] = permission
        return permission


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for r in self._by_id.values():
            if r.name == name:
                return r
        return None

    async def list_all(
        self, *, search: str | None = None, limit: int | None = None, offset: int = 0
    ) -> list[Role]:
        items = sorted(self._by_id.values(), key=lambda r: (r.level, r.name))
        if search:
            term = search.lower()
            items = [
                r for r in items
                if term in r.name.lower() or term in (r.description or "").lower()
            ]
        return _page(items, limit, offset)

    async def list_default(self) -> list[Role]:
        return [r for r in await self.list_all() if r.is_default and r.is_active]

    async def list_up_to_level(self, level: int) -> list[Role]:
        return [r for r in await self.list_all() if r.level <= level and r.is_active]

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        return role

    async def update(self, role: Role) -> None:
        self._by_id[role.id] = role

    async def delete(self, role_id: UUID) -> None:
        self._by_id.pop(role_id, None)

    def add(self, role: Role) -> Role:
        """Helper to add role for tests."""
        self._by_id[role.id] = role
        return role


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def get_many(self, user_ids: list[str]) -> list[User]:
        return [self._by_id[uid] for uid in user_ids if uid in self._by_id]

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
        items = list(self._by_id.values())
        if store_id is not None:
            items = [u for u in items if u.store_id == store_id]
        if role is not None:
            items = [u for u in items if u.role == role]
        if is_active is not None:
            items = [u for u in items if u.is_active == is_active]
        if search:
            term = search.lower()
            items = [u for u in items if term in u.name.lower() or term in u.email.lower()]
        return _page(sorted(items, key=lambda u: u.name), limit, offset)

    async def count_active_admins(self) -> int:
        return await self.count_active_by_role("admin")

    async def count_active_by_role(self, role: str) -> int:
        return sum(1 for u in self._by_id.values() if u.role == role and u.is_active)

    async def count(self, *, is_active: bool | None = None) -> int:
        return len(await self.list(is_active=is_active))

    async def create(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def update(self, user: User) -> None:
        self._by_id[user.id] = user

    async def delete(self, user_id: str) -> None:
        self._by_id.pop(user_id, None)

    async def bulk_update(self, user_ids: list[str], updates: dict[str, Any]) -> int:
        changed = 0
        for uid in user_ids:
            if uid in self._by_id:
                self._by_id[uid] = replace(self._by_id[uid], **updates)
                changed += 1
        return changed

    async def reassign_role(self, old_name: str, new_name: str) -> int:
        return await self.bulk_update(
            [u.id for u in self._by_id.values() if u.role == old_name], {"role": new_name}
        )

    def add(self, user: User) -> User:
        """Helper to add user for tests."""
        self._by_id[user.id] = user
        return user


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.permissions = FakePermissionRepository(roles_repo=self.roles)
        self.users = FakeUserRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow
        await uow.commit()

    return _factory


def failing_factory(exc: Exception):
    """Factory whose every catalog read raises ``exc``."""

    @asynccontextmanager
    async def _factory():
        raise exc
        yield  # pragma: no cover

    return _factory


# --- Builders ---


def make_permission(
    resource: str,
    action: str,
    *,
    is_active: bool = True,
    is_system: bool = False,
    name: str | None = None,
    category: PermissionCategory = PermissionCategory.INVENTORY,
) -> Permission:
    now = datetime.now(UTC)
    return Permission(
        id=uuid4(),
        name=name or f"{action} {resource}",
        resource=resource,
        action=PermissionAction(action),
        category=category,
        is_active=is_active,
        is_system=is_system,
        created_at=now,
        updated_at=now,
    )


def make_role(
    name: str, *, level: int = 1, permissions: list[Permission] = (), is_default: bool = False
) -> Role:
    now = datetime.now(UTC)
    return Role(
        id=uuid4(),
        name=name,
        level=level,
        permission_ids={p.id for p in permissions},
        is_default=is_default,
        created_at=now,
        updated_at=now,
    )


def make_user(
    user_id: str, role: str, *, is_active: bool = True, store_id: str | None = None
) -> User:
    now = datetime.now(UTC)
    return User(
        id=user_id,
        name=user_id.title(),
        email=f"{user_id}@example.com",
        role=role,
        is_active=is_active,
        store_id=store_id,
        created_at=now,
        updated_at=now,
    )


def ctx(
    role: str | None,
    *,
    user_id: str = "u-1",
    is_active: bool = True,
    store_id: str | None = None,
    method: str = "GET",
    target_user_id: str | None = None,
    target_store_id: str | None = None,
) -> PrincipalContext:
    """PrincipalContext for a principal holding ``role``; None means anonymous."""
    principal = (
        None
        if role is None
        else Principal(user_id=user_id, role=role, is_active=is_active, store_id=store_id)
    )
    return PrincipalContext(
        principal=principal,
        method=method,
        target_user_id=target_user_id,
        target_store_id=target_store_id,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over ``fake_uow``."""
    return make_factory(fake_uow)


@pytest.fixture
def catalog(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """staff with no permissions, manager with products:update, sales:manage role."""
    products_update = fake_uow.permissions.add(make_permission("products", "update"))
    sales_manage = fake_uow.permissions.add(
        make_permission("sales", "manage", category=PermissionCategory.SALES)
    )
    fake_uow.roles.add(make_role("staff", level=1, is_default=True))
    fake_uow.roles.add(
        make_role("manager", level=2, permissions=[products_update], is_default=True)
    )
    fake_uow.roles.add(make_role("admin", level=10, is_default=True))
    fake_uow.roles.add(make_role("cashier", level=1, permissions=[sales_manage]))
    return fake_uow
