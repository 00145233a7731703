"""Council tally service implementation.

This module implements the per-role vote count used to finalize a
council election. The algorithm is stateless and pure: given the same
votes and tie-break policy it always produces the same result.

Algorithm:
1. Keep only the votes for the tallied role
2. Count votes per target apartment
3. Find the highest count and every apartment sharing it
4. Apply the tie-break policy when more than one apartment shares it
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

import structlog

from residence_council.application.ports.tally import TallyProtocol
from residence_council.domain.errors.election import (
    NoVotesCastError,
    TieNotResolvedError,
)
from residence_council.domain.models.council_result import (
    TALLY_ALGORITHM_VERSION,
    TallyResult,
    TieBreakPolicy,
)
from residence_council.domain.models.council_role import ALL_ROLES, CouncilRole
from residence_council.domain.models.vote import Vote

logger = structlog.get_logger(__name__)


class TallyService(TallyProtocol):
    """Deterministic plurality tally with a configurable tie-break policy.

    The default policy elects the lowest-numbered apartment among those
    sharing the highest count and records the tie in the result.
    """

    def __init__(
        self,
        tie_break_policy: TieBreakPolicy = TieBreakPolicy.LOWEST_APARTMENT_NUMBER,
    ) -> None:
        """Initialize the tally service.

        Args:
            tie_break_policy: How ties for the highest count are resolved.
        """
        self._tie_break_policy = tie_break_policy
        self._log = logger.bind(
            component="tally", tie_break_policy=tie_break_policy.value
        )

    @property
    def tie_break_policy(self) -> TieBreakPolicy:
        return self._tie_break_policy

    def count_votes(self, votes: Iterable[Vote], role: CouncilRole) -> dict[int, int]:
        """Count votes per target apartment for one role.

        Args:
            votes: Votes to count; votes for other roles are ignored.
            role: The role to count.

        Returns:
            Mapping of apartment number to vote count, apartment ascending.
        """
        counts = Counter(vote.target_apartment for vote in votes if vote.role == role)
        return {number: counts[number] for number in sorted(counts)}

    def tally(self, votes: Iterable[Vote], role: CouncilRole) -> TallyResult:
        """Count the votes for one role and pick the winner.

        Args:
            votes: Votes of the cycle; votes for other roles are ignored.
            role: The role to tally.

        Returns:
            TallyResult with the winner, counts and any tie.

        Raises:
            NoVotesCastError: If no vote was cast for the role.
            TieNotResolvedError: If the policy is REJECT and the top count is shared.
        """
        log = self._log.bind(role=role.value)

        counts = self.count_votes(votes, role)
        if not counts:
            log.warning("tally_no_votes_cast")
            raise NoVotesCastError(role)

        top_count = max(counts.values())
        tied = tuple(number for number, count in counts.items() if count == top_count)

        if len(tied) > 1:
            if self._tie_break_policy is TieBreakPolicy.REJECT:
                log.warning(
                    "tally_tie_rejected",
                    tied_apartments=list(tied),
                    votes=top_count,
                )
                raise TieNotResolvedError(role, tied, top_count)
            log.info(
                "tally_tie_broken",
                tied_apartments=list(tied),
                votes=top_count,
                winner=tied[0],
            )

        result = TallyResult(
            role=role,
            winner=tied[0],
            vote_counts=tuple(counts.items()),
            tied_apartments=tied,
            tie_break_policy=self._tie_break_policy,
            algorithm_version=TALLY_ALGORITHM_VERSION,
        )
        log.debug(
            "tally_computed",
            winner=result.winner,
            distribution=result.to_dict()["vote_counts"],
        )
        return result

    def tally_all(self, votes: Iterable[Vote]) -> tuple[TallyResult, ...]:
        """Tally every council role in role order.

        Args:
            votes: Votes of the cycle.

        Returns:
            One TallyResult per council role.

        Raises:
            NoVotesCastError: If any role received no vote.
            TieNotResolvedError: If the policy rejects a tie for any role.
        """
        ballot = tuple(votes)
        return tuple(self.tally(ballot, role) for role in ALL_ROLES)
