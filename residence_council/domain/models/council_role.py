"""Council role enumeration.

The council has exactly three seats. The declaration order below is the
canonical ordering used for listings and tallies.
"""

from __future__ import annotations

from enum import Enum


class CouncilRole(Enum):
    """Governance positions elected by the residence.

    Roles:
        CHAIRMAN: Presides over the council
        TREASURER: Manages residence funds
        CONTROLLER: Audits council decisions and spending
    """

    CHAIRMAN = "Chairman"
    TREASURER = "Treasurer"
    CONTROLLER = "Controller"

    @property
    def rank(self) -> int:
        """Position of this role in the canonical ordering (0-based)."""
        return ALL_ROLES.index(self)

    @classmethod
    def parse(cls, value: str) -> CouncilRole:
        """Parse a role from its value or member name, case-insensitively.

        Args:
            value: Role text such as "Chairman" or "TREASURER".

        Returns:
            The matching CouncilRole.

        Raises:
            ValueError: If the text names no council role.
        """
        normalized = value.strip().lower()
        for role in cls:
            if normalized in (role.value.lower(), role.name.lower()):
                return role
        raise ValueError(f"Unknown council role: {value!r}")


ALL_ROLES: tuple[CouncilRole, ...] = (
    CouncilRole.CHAIRMAN,
    CouncilRole.TREASURER,
    CouncilRole.CONTROLLER,
)
