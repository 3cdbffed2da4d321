"""Create and update user use cases."""

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from stockroom.application.use_cases.user.admin_guard import (
    ensure_admins_remain,
    is_active_admin,
)
from stockroom.domain.entities import User
from stockroom.domain.exceptions import Conflict, NotFound, ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class UserInput:
    """User fields; on update ``None`` leaves a field unchanged."""

    name: str | None = None
    email: str | None = None
    role: str | None = None
    store_id: str | None = None
    is_active: bool | None = None


async def ensure_role_exists(uow, role_name: str) -> None:
    """User.role is a role name; it must resolve in the role catalog."""
    if not await uow.roles.get_by_name(role_name):
        raise ValidationError(f"Unknown role: {role_name}")


class CreateUserUseCase:
    """Create a user account (identity is issued by the identity provider)."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, data: UserInput) -> User:
        if not data.name or not data.email or not data.role:
            raise ValidationError("Name, email, and role are required")
        if not EMAIL_PATTERN.match(data.email):
            raise ValidationError("Invalid email address")

        async with self._uow_factory() as uow:
            if await uow.users.get_by_id(user_id):
                raise Conflict("User already exists")
            await ensure_role_exists(uow, data.role)

            now = datetime.now(UTC)
            user = User(
                id=user_id,
                name=data.name.strip(),
                email=data.email.strip().lower(),
                role=data.role,
                is_active=True if data.is_active is None else data.is_active,
                store_id=data.store_id,
                created_at=now,
                updated_at=now,
            )
            await uow.users.create(user)

        return user


class UpdateUserUseCase:
    """Update a user; demoting or deactivating the last active admin is refused."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, data: UserInput) -> User:
        if data.email is not None and not EMAIL_PATTERN.match(data.email):
            raise ValidationError("Invalid email address")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            if data.role is not None and data.role != user.role:
                await ensure_role_exists(uow, data.role)

            was_admin = is_active_admin(user)
            if data.name is not None:
                user.name = data.name.strip()
            if data.email is not None:
                user.email = data.email.strip().lower()
            if data.role is not None:
                user.role = data.role
            if data.store_id is not None:
                user.store_id = data.store_id
            if data.is_active is not None:
                user.is_active = data.is_active

            if was_admin and not is_active_admin(user):
                await ensure_admins_remain(uow, 1, "Cannot modify the last admin user")

            user.updated_at = datetime.now(UTC)
            await uow.users.update(user)

        return user
