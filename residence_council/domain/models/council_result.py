"""Tally and council result domain models.

A TallyResult is the outcome of counting one role's votes. A
CouncilResult collects one TallyResult per role and is produced only by a
successful finalize; it never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from residence_council.domain.models.council_role import ALL_ROLES, CouncilRole
from residence_council.domain.models.principal import Principal

# Bumped whenever the counting or tie-break rules change.
TALLY_ALGORITHM_VERSION = 1


class TieBreakPolicy(Enum):
    """How a tally resolves several apartments sharing the highest count.

    Policies:
        LOWEST_APARTMENT_NUMBER: The lowest-numbered tied apartment wins
        REJECT: The tie is reported for manual resolution
    """

    LOWEST_APARTMENT_NUMBER = "lowest_apartment_number"
    REJECT = "reject"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class TallyResult:
    """Outcome of counting the votes for one council role.

    Attributes:
        role: The tallied role.
        winner: Winning apartment number.
        vote_counts: (apartment_number, votes) pairs, apartment ascending.
        tied_apartments: Apartments sharing the highest count, ascending.
            Holds only the winner when there was no tie.
        tie_break_policy: Policy applied to pick the winner.
        algorithm_version: Tally algorithm version.
    """

    role: CouncilRole
    winner: int
    vote_counts: tuple[tuple[int, int], ...]
    tied_apartments: tuple[int, ...]
    tie_break_policy: TieBreakPolicy
    algorithm_version: int = TALLY_ALGORITHM_VERSION

    def __post_init__(self) -> None:
        """Validate tally consistency."""
        if self.winner not in self.tied_apartments:
            raise ValueError(
                f"Winner {self.winner} must be among the top apartments "
                f"{list(self.tied_apartments)}"
            )

    @property
    def tie_broken(self) -> bool:
        """True if the winner was picked by the tie-break policy."""
        return len(self.tied_apartments) > 1

    @property
    def winning_votes(self) -> int:
        return dict(self.vote_counts)[self.winner]

    @property
    def total_votes(self) -> int:
        return sum(count for _, count in self.vote_counts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "winner": self.winner,
            "vote_counts": {str(number): count for number, count in self.vote_counts},
            "tied_apartments": list(self.tied_apartments),
            "tie_broken": self.tie_broken,
            "tie_break_policy": self.tie_break_policy.value,
            "algorithm_version": self.algorithm_version,
        }


@dataclass(frozen=True, eq=True)
class CouncilResult:
    """The elected council for one finalized cycle.

    Attributes:
        cycle_id: Election cycle that produced the result.
        tallies: One TallyResult per council role, in role order.
        owners: Owner identity of each winning apartment, in role order.
        finalized_at: When the cycle was finalized.
    """

    cycle_id: int
    tallies: tuple[TallyResult, ...]
    owners: tuple[tuple[CouncilRole, Principal], ...]
    finalized_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Every council role must be filled exactly once."""
        roles = tuple(tally.role for tally in self.tallies)
        if roles != ALL_ROLES:
            raise ValueError(
                f"Council result must cover roles {[r.value for r in ALL_ROLES]} "
                f"in order, got {[r.value for r in roles]}"
            )

    @property
    def members(self) -> dict[CouncilRole, int]:
        """Winning apartment number per role."""
        return {tally.role: tally.winner for tally in self.tallies}

    def winner_for(self, role: CouncilRole) -> int:
        return self.members[role]

    def owner_for(self, role: CouncilRole) -> Principal:
        return dict(self.owners)[role]

    def tally_for(self, role: CouncilRole) -> TallyResult:
        for tally in self.tallies:
            if tally.role == role:
                return tally
        raise KeyError(role)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for query responses and logs."""
        return {
            "cycle_id": self.cycle_id,
            "members": {role.value: number for role, number in self.members.items()},
            "owners": {role.value: str(owner) for role, owner in self.owners},
            "tallies": [tally.to_dict() for tally in self.tallies],
            "finalized_at": self.finalized_at.isoformat(),
        }
