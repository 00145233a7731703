"""Council application errors."""

from __future__ import annotations

from residence_council.domain.exceptions import ResidenceError
from residence_council.domain.models.council_role import CouncilRole
from residence_council.domain.models.principal import Principal


class DuplicateApplicationError(ResidenceError):
    """Raised when an owner applies for a second council role.

    An owner identity may hold exactly one application per cycle, across
    all roles.

    Attributes:
        owner: The owner that already applied.
        existing_role: Role of the application already on record.
        requested_role: Role of the rejected application.
    """

    def __init__(
        self,
        owner: Principal,
        existing_role: CouncilRole,
        requested_role: CouncilRole,
    ) -> None:
        """Initialize DuplicateApplicationError.

        Args:
            owner: The owner that already applied.
            existing_role: Role of the application already on record.
            requested_role: Role of the rejected application.
        """
        self.owner = owner
        self.existing_role = existing_role
        self.requested_role = requested_role
        super().__init__(
            f"Owner {owner} has already applied for the role of "
            f"{existing_role.value}; cannot also apply for {requested_role.value}"
        )
