"""Fixed three-tier role hierarchy used by the coarse role gates."""

from enum import StrEnum


class HierarchyRole(StrEnum):
    """Built-in role names with a fixed rank.

    These weights are unrelated to ``Role.level`` in the role catalog. The two
    rankings are never reconciled; changing either one changes authorization
    outcomes.
    """

    STAFF = "staff"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def weight(self) -> int:
        return HIERARCHY_WEIGHTS[self]

    @classmethod
    def weight_of(cls, role_name: str | None) -> int:
        """Rank of a role name; unknown and custom roles rank 0."""
        try:
            return cls(role_name).weight
        except ValueError:
            return 0


HIERARCHY_WEIGHTS: dict[HierarchyRole, int] = {
    HierarchyRole.STAFF: 1,
    HierarchyRole.MANAGER: 2,
    HierarchyRole.ADMIN: 3,
}
