"""Tally protocol.

This module defines the interface for counting council votes. The
protocol enables dependency inversion and testability for the election
service. Implementations must be pure: the same votes always produce the
same result, and no shared state is mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from residence_council.domain.models.council_result import TallyResult
from residence_council.domain.models.council_role import CouncilRole
from residence_council.domain.models.vote import Vote


class TallyProtocol(Protocol):
    """Protocol for computing council role winners from votes."""

    def tally(self, votes: Iterable[Vote], role: CouncilRole) -> TallyResult:
        """Count the votes for one role and pick the winner.

        Args:
            votes: Votes of the cycle; votes for other roles are ignored.
            role: The role to tally.

        Returns:
            TallyResult with the winner and per-apartment counts.

        Raises:
            NoVotesCastError: If no vote was cast for the role.
            TieNotResolvedError: If the tie-break policy rejects a tie.
        """
        ...

    def tally_all(self, votes: Iterable[Vote]) -> tuple[TallyResult, ...]:
        """Tally every council role in role order.

        Args:
            votes: Votes of the cycle.

        Returns:
            One TallyResult per council role.
        """
        ...
