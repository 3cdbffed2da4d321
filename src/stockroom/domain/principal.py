"""Authenticated principal and per-request authorization context."""

from dataclasses import dataclass

from stockroom.domain.entities import User
from stockroom.domain.value_objects import HierarchyRole


@dataclass(frozen=True)
class Principal:
    """Snapshot of the caller taken when the request was authenticated.

    Only ``role``, ``is_active`` and ``store_id`` feed authorization.
    """

    user_id: str
    role: str
    is_active: bool = True
    store_id: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(
            user_id=user.id,
            role=user.role,
            is_active=user.is_active,
            store_id=user.store_id,
        )

    def is_superuser(self) -> bool:
        """Admin bypass shared by every gate."""
        return self.role == HierarchyRole.ADMIN

    @property
    def weight(self) -> int:
        return HierarchyRole.weight_of(self.role)


@dataclass(frozen=True)
class PrincipalContext:
    """Principal plus the request metadata gates may inspect."""

    principal: Principal | None
    method: str = "GET"
    target_user_id: str | None = None
    target_store_id: str | None = None

    @property
    def targets_other_user(self) -> bool:
        return (
            self.principal is not None
            and self.target_user_id is not None
            and self.target_user_id != self.principal.user_id
        )
