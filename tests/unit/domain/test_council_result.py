"""Unit tests for TallyResult and CouncilResult."""

import pytest

from residence_council.domain.models.council_result import (
    TALLY_ALGORITHM_VERSION,
    CouncilResult,
    TallyResult,
    TieBreakPolicy,
)
from residence_council.domain.models.council_role import ALL_ROLES, CouncilRole
from residence_council.domain.models.principal import Principal


def _tally(role: CouncilRole, winner: int) -> TallyResult:
    return TallyResult(
        role=role,
        winner=winner,
        vote_counts=((winner, 3),),
        tied_apartments=(winner,),
        tie_break_policy=TieBreakPolicy.LOWEST_APARTMENT_NUMBER,
    )


class TestTallyResult:
    """Tests for TallyResult."""

    def test_no_tie(self) -> None:
        tally = _tally(CouncilRole.CHAIRMAN, 1)
        assert not tally.tie_broken
        assert tally.winning_votes == 3
        assert tally.total_votes == 3
        assert tally.algorithm_version == TALLY_ALGORITHM_VERSION

    def test_tie_broken_flag(self) -> None:
        tally = TallyResult(
            role=CouncilRole.CHAIRMAN,
            winner=2,
            vote_counts=((2, 1), (3, 1)),
            tied_apartments=(2, 3),
            tie_break_policy=TieBreakPolicy.LOWEST_APARTMENT_NUMBER,
        )
        assert tally.tie_broken
        assert tally.to_dict()["tie_broken"] is True

    def test_winner_must_be_top_apartment(self) -> None:
        with pytest.raises(ValueError, match="must be among the top"):
            TallyResult(
                role=CouncilRole.CHAIRMAN,
                winner=5,
                vote_counts=((2, 1),),
                tied_apartments=(2,),
                tie_break_policy=TieBreakPolicy.LOWEST_APARTMENT_NUMBER,
            )


class TestCouncilResult:
    """Tests for CouncilResult."""

    def test_members_and_owners(self) -> None:
        result = CouncilResult(
            cycle_id=1,
            tallies=tuple(_tally(role, n) for n, role in enumerate(ALL_ROLES, start=1)),
            owners=tuple(
                (role, Principal(f"owner-{n}")) for n, role in enumerate(ALL_ROLES, start=1)
            ),
        )

        assert result.members == {
            CouncilRole.CHAIRMAN: 1,
            CouncilRole.TREASURER: 2,
            CouncilRole.CONTROLLER: 3,
        }
        assert result.owner_for(CouncilRole.TREASURER) == Principal("owner-2")
        assert result.tally_for(CouncilRole.CONTROLLER).winner == 3

        as_dict = result.to_dict()
        assert as_dict["members"] == {"Chairman": 1, "Treasurer": 2, "Controller": 3}
        assert as_dict["owners"]["Controller"] == "owner-3"

    def test_must_cover_every_role(self) -> None:
        with pytest.raises(ValueError, match="must cover roles"):
            CouncilResult(
                cycle_id=1,
                tallies=(_tally(CouncilRole.CHAIRMAN, 1),),
                owners=((CouncilRole.CHAIRMAN, Principal("owner-1")),),
            )
