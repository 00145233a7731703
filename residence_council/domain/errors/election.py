"""Council election errors.

This module defines errors raised by the election state machine and the
tally. Every rejected transition is reported to the caller; none is
silently ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from residence_council.domain.exceptions import ResidenceError
from residence_council.domain.models.council_role import CouncilRole

if TYPE_CHECKING:
    from residence_council.domain.models.election_cycle import ElectionPhase


class ElectionError(ResidenceError):
    """Base class for council election errors."""

    pass


class InvalidElectionStateError(ElectionError):
    """Raised when an operation is not allowed in the current phase.

    Attributes:
        phase: Current election phase.
        operation: The rejected operation.
        allowed_phases: Phases in which the operation is permitted.
    """

    def __init__(
        self,
        phase: ElectionPhase,
        operation: str,
        allowed_phases: tuple[ElectionPhase, ...] = (),
    ) -> None:
        """Initialize InvalidElectionStateError.

        Args:
            phase: Current election phase.
            operation: The rejected operation.
            allowed_phases: Phases in which the operation is permitted.
        """
        self.phase = phase
        self.operation = operation
        self.allowed_phases = allowed_phases

        allowed_str = (
            f" Allowed in: {[p.value for p in allowed_phases]}"
            if allowed_phases
            else ""
        )
        super().__init__(
            f"Cannot {operation} while election is {phase.value}.{allowed_str}"
        )


class NoApplicationsError(ElectionError):
    """Raised when a proposal is made with no applications for any role."""

    def __init__(self) -> None:
        super().__init__("Council proposal requires at least one application")


class NotACandidateError(ElectionError):
    """Raised when voting for an apartment that did not apply for the role.

    Attributes:
        apartment_number: The apartment voted for.
        role: The role of the vote.
    """

    def __init__(self, apartment_number: int, role: CouncilRole) -> None:
        self.apartment_number = apartment_number
        self.role = role
        super().__init__(
            f"Apartment {apartment_number} has not applied for the role of {role.value}"
        )


class SelfVoteNotAllowedError(ElectionError):
    """Raised when an apartment votes for itself and self-voting is disabled."""

    def __init__(self, apartment_number: int, role: CouncilRole) -> None:
        self.apartment_number = apartment_number
        self.role = role
        super().__init__(
            f"Apartment {apartment_number} cannot vote for itself as {role.value}"
        )


class IncompleteVotingError(ElectionError):
    """Raised when finalizing before every apartment voted for every role.

    Attributes:
        missing: (apartment_number, role) pairs without a vote.
    """

    def __init__(self, missing: tuple[tuple[int, CouncilRole], ...]) -> None:
        """Initialize IncompleteVotingError.

        Args:
            missing: (apartment_number, role) pairs without a vote.
        """
        self.missing = missing
        preview = ", ".join(f"{number}/{role.value}" for number, role in missing[:5])
        more = f" and {len(missing) - 5} more" if len(missing) > 5 else ""
        super().__init__(f"Voting is incomplete; missing votes: {preview}{more}")


class NotFinalizedError(ElectionError):
    """Raised when querying council members before any cycle has finalized."""

    def __init__(self) -> None:
        super().__init__("No council election has been finalized yet")


class NoVotesCastError(ElectionError):
    """Raised when tallying a role that received no votes."""

    def __init__(self, role: CouncilRole) -> None:
        self.role = role
        super().__init__(f"No votes cast for the role of {role.value}")


class TieNotResolvedError(ElectionError):
    """Raised when a tally ties and the policy requires manual resolution.

    Attributes:
        role: The tied role.
        tied_apartments: Apartments sharing the highest count.
        votes: The shared highest count.
    """

    def __init__(
        self,
        role: CouncilRole,
        tied_apartments: tuple[int, ...],
        votes: int,
    ) -> None:
        self.role = role
        self.tied_apartments = tied_apartments
        self.votes = votes
        super().__init__(
            f"Tie for the role of {role.value} between apartments "
            f"{list(tied_apartments)} with {votes} vote(s) each; resolve manually"
        )
