"""Election cycle domain model.

An ElectionCycle is the frozen snapshot of one council election: its
identifier, its phase and the votes recorded so far. Every state change
returns a new instance; opening a new proposal builds a fresh cycle with
an empty vote ledger instead of clearing the old one, so votes from a
previous cycle cannot leak into the next tally.

State Machine:
    IDLE -> COLLECTING (residence set up, applications open)
    COLLECTING -> VOTING (council proposal made)
    VOTING -> VOTING (proposal made again, restarting the cycle)
    VOTING -> FINALIZED (all votes in, winners computed)
    FINALIZED -> VOTING (new proposal with the same applications)
    FINALIZED -> COLLECTING (new application window)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from residence_council.domain.errors.election import InvalidElectionStateError
from residence_council.domain.models.council_role import ALL_ROLES, CouncilRole
from residence_council.domain.models.vote import Vote


class ElectionPhase(Enum):
    """Phase of the council election.

    Phases:
        IDLE: Residence not yet set up
        COLLECTING: Applications are being collected
        VOTING: Proposal open, votes accepted
        FINALIZED: Winners computed for the cycle
    """

    IDLE = "IDLE"
    COLLECTING = "COLLECTING"
    VOTING = "VOTING"
    FINALIZED = "FINALIZED"

    def valid_transitions(self) -> frozenset[ElectionPhase]:
        """Phases reachable from this phase."""
        return PHASE_TRANSITION_MATRIX.get(self, frozenset())

    def can_transition_to(self, target: ElectionPhase) -> bool:
        return target in self.valid_transitions()


PHASE_TRANSITION_MATRIX: dict[ElectionPhase, frozenset[ElectionPhase]] = {
    ElectionPhase.IDLE: frozenset({ElectionPhase.COLLECTING}),
    ElectionPhase.COLLECTING: frozenset({ElectionPhase.VOTING}),
    ElectionPhase.VOTING: frozenset({ElectionPhase.VOTING, ElectionPhase.FINALIZED}),
    ElectionPhase.FINALIZED: frozenset(
        {ElectionPhase.VOTING, ElectionPhase.COLLECTING}
    ),
}


def _phases_reaching(target: ElectionPhase) -> tuple[ElectionPhase, ...]:
    return tuple(
        phase for phase in ElectionPhase if target in PHASE_TRANSITION_MATRIX[phase]
    )


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class ElectionCycle:
    """Snapshot of the current council election.

    Attributes:
        cycle_id: Monotonic identifier, incremented by every proposal.
        phase: Current election phase.
        votes: Votes recorded in this cycle, at most one per (voter, role).
        opened_at: When this cycle snapshot was opened.
    """

    cycle_id: int = 0
    phase: ElectionPhase = field(default=ElectionPhase.IDLE)
    votes: tuple[Vote, ...] = field(default_factory=tuple)
    opened_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate cycle invariants."""
        if self.cycle_id < 0:
            raise ValueError(f"cycle_id must be non-negative, got {self.cycle_id}")
        keys = [vote.key for vote in self.votes]
        if len(keys) != len(set(keys)):
            raise ValueError("At most one vote per (voter, role) is allowed")
        foreign = [vote for vote in self.votes if vote.cycle_id != self.cycle_id]
        if foreign:
            raise ValueError(
                f"Votes from cycle {foreign[0].cycle_id} cannot be recorded "
                f"in cycle {self.cycle_id}"
            )

    def require_phase(self, operation: str, *allowed: ElectionPhase) -> None:
        """Raise unless the cycle is in one of the allowed phases.

        Raises:
            InvalidElectionStateError: If the current phase is not allowed.
        """
        if self.phase not in allowed:
            raise InvalidElectionStateError(self.phase, operation, allowed)

    def with_phase(self, new_phase: ElectionPhase) -> ElectionCycle:
        """Return a copy in a new phase, keeping cycle id and votes.

        Raises:
            InvalidElectionStateError: If the transition is not in the matrix.
        """
        if not self.phase.can_transition_to(new_phase):
            raise InvalidElectionStateError(
                self.phase,
                f"move to {new_phase.value}",
                _phases_reaching(new_phase),
            )
        return replace(self, phase=new_phase)

    def next_cycle(self) -> ElectionCycle:
        """Open a new voting cycle with an empty vote ledger.

        Raises:
            InvalidElectionStateError: If voting cannot be opened from here.
        """
        if not self.phase.can_transition_to(ElectionPhase.VOTING):
            raise InvalidElectionStateError(
                self.phase,
                "make a council proposal",
                _phases_reaching(ElectionPhase.VOTING),
            )
        return ElectionCycle(
            cycle_id=self.cycle_id + 1,
            phase=ElectionPhase.VOTING,
            votes=(),
        )

    def with_vote(self, vote: Vote) -> ElectionCycle:
        """Return a copy with the vote upserted for its (voter, role).

        A later vote for the same voter and role replaces the earlier one.
        """
        self.require_phase("vote", ElectionPhase.VOTING)
        kept = tuple(v for v in self.votes if v.key != vote.key)
        return replace(self, votes=kept + (vote,))

    def vote_of(self, voter_apartment: int, role: CouncilRole) -> Vote | None:
        for vote in self.votes:
            if vote.key == (voter_apartment, role):
                return vote
        return None

    def votes_for_role(self, role: CouncilRole) -> tuple[Vote, ...]:
        return tuple(vote for vote in self.votes if vote.role == role)

    def missing_votes(
        self, apartment_numbers: Iterable[int]
    ) -> tuple[tuple[int, CouncilRole], ...]:
        """List (apartment, role) pairs that have no vote in this cycle.

        Args:
            apartment_numbers: Every registered apartment.

        Returns:
            Missing pairs ordered by apartment number, then role order.
        """
        cast = {vote.key for vote in self.votes}
        return tuple(
            (number, role)
            for number in sorted(apartment_numbers)
            for role in ALL_ROLES
            if (number, role) not in cast
        )
