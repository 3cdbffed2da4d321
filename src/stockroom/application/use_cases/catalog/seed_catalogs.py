"""Seed the permission and role catalogs."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from stockroom.application.use_cases.catalog.default_catalog import (
    DEFAULT_PERMISSIONS,
    DEFAULT_ROLE_GRANTS,
    DEFAULT_ROLES,
)
from stockroom.domain.entities import Permission, Role

logger = logging.getLogger("stockroom.seed")


@dataclass
class SeedResult:
    """What a seeding run created."""

    permissions: int
    roles: int


class SeedCatalogsUseCase:
    """Install the default permissions and the admin/manager/staff roles.

    Does nothing when either catalog already has records.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> SeedResult:
        async with self._uow_factory() as uow:
            if await uow.permissions.list() or await uow.roles.list_all():
                logger.info("Catalogs already seeded, skipping")
                return SeedResult(permissions=0, roles=0)

            now = datetime.now(UTC)
            permissions = []
            for name, description, category, resource, action, level in DEFAULT_PERMISSIONS:
                permission = Permission(
                    id=uuid4(),
                    name=name,
                    resource=resource,
                    action=action,
                    category=category,
                    level=level,
                    description=description,
                    is_system=True,
                    created_at=now,
                    updated_at=now,
                )
                await uow.permissions.create(permission)
                permissions.append(permission)

            for name, description, level, color in DEFAULT_ROLES:
                grants = DEFAULT_ROLE_GRANTS[name]
                role = Role(
                    id=uuid4(),
                    name=name,
                    level=level,
                    description=description,
                    permission_ids={
                        p.id
                        for p in permissions
                        if grants is None or p.action in grants.get(p.resource, ())
                    },
                    is_default=True,
                    color=color,
                    created_at=now,
                    updated_at=now,
                )
                role.user_count = await uow.users.count_active_by_role(name)
                await uow.roles.create(role)

        logger.info("Seeded %d permissions and %d roles", len(permissions), len(DEFAULT_ROLES))
        return SeedResult(permissions=len(permissions), roles=len(DEFAULT_ROLES))
