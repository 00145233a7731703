"""Council vote value object."""

from __future__ import annotations

from dataclasses import dataclass

from residence_council.domain.models.council_role import CouncilRole


@dataclass(frozen=True, eq=True)
class Vote:
    """A ballot cast by one apartment for one council role.

    Attributes:
        voter_apartment: Apartment casting the vote.
        target_apartment: Candidate apartment voted for.
        role: Council role the vote is for.
        cycle_id: Election cycle the vote belongs to.
    """

    voter_apartment: int
    target_apartment: int
    role: CouncilRole
    cycle_id: int

    @property
    def key(self) -> tuple[int, CouncilRole]:
        """Uniqueness key: one vote per voter and role."""
        return (self.voter_apartment, self.role)

    @property
    def is_self_vote(self) -> bool:
        return self.voter_apartment == self.target_apartment
