"""End-to-end council election tests.

Drives a residence through setup, applications, proposals, voting and
finalize using only the public service calls.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from residence_council.application.services.residence_service import ResidenceService
from residence_council.config.election_config import (
    STRICT_ELECTION_CONFIG,
    ElectionConfig,
)
from residence_council.domain.errors.election import (
    IncompleteVotingError,
    SelfVoteNotAllowedError,
    TieNotResolvedError,
)
from residence_council.domain.models.council_result import TieBreakPolicy
from residence_council.domain.models.council_role import CouncilRole
from residence_council.domain.models.election_cycle import ElectionPhase
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Builder, MaintenanceExpense

pytestmark = pytest.mark.integration

ROLE_OF = {
    1: CouncilRole.CHAIRMAN,
    2: CouncilRole.TREASURER,
    3: CouncilRole.CONTROLLER,
}


def _apply_one_role_each(
    service: ResidenceService, owners: dict[int, Principal]
) -> None:
    for number, role in ROLE_OF.items():
        service.apply_for_council(number, role, owners[number])


def _vote_for_everyone(
    service: ResidenceService,
    owners: dict[int, Principal],
    choices: dict[CouncilRole, int],
) -> None:
    for voter, owner in owners.items():
        for role, target in choices.items():
            service.vote_for_council(voter, target, role, owner)


class TestThreeApartmentElection:
    """One candidate per role, everybody votes for them."""

    def test_full_cycle(
        self,
        service: ResidenceService,
        owners: dict[int, Principal],
    ) -> None:
        _apply_one_role_each(service, owners)
        cycle_id = service.make_council_proposal()
        _vote_for_everyone(service, owners, {role: n for n, role in ROLE_OF.items()})

        result = service.finalize_council()

        assert result.cycle_id == cycle_id
        assert result.members == {
            CouncilRole.CHAIRMAN: 1,
            CouncilRole.TREASURER: 2,
            CouncilRole.CONTROLLER: 3,
        }
        assert all(tally.winning_votes == 3 for tally in result.tallies)
        assert service.get_council_members() == result
        assert service.phase is ElectionPhase.FINALIZED

    def test_votes_visible_while_voting(
        self,
        service: ResidenceService,
        owners: dict[int, Principal],
    ) -> None:
        _apply_one_role_each(service, owners)
        service.make_council_proposal()
        service.vote_for_council(1, 3, CouncilRole.CONTROLLER, owners[1])
        service.vote_for_council(2, 3, CouncilRole.CONTROLLER, owners[2])

        standings = service.get_council_votes()

        assert standings[CouncilRole.CONTROLLER] == ((3, 2),)
        assert standings[CouncilRole.CHAIRMAN] == ((1, 0),)

    def test_new_proposal_ignores_earlier_votes(
        self,
        service: ResidenceService,
        owners: dict[int, Principal],
    ) -> None:
        _apply_one_role_each(service, owners)
        service.make_council_proposal()
        _vote_for_everyone(service, owners, {role: n for n, role in ROLE_OF.items()})

        service.make_council_proposal()

        with pytest.raises(IncompleteVotingError) as exc_info:
            service.finalize_council()
        assert len(exc_info.value.missing) == 9

    def test_proposal_after_finalize_ignores_earlier_votes(
        self,
        service: ResidenceService,
        owners: dict[int, Principal],
    ) -> None:
        _apply_one_role_each(service, owners)
        service.make_council_proposal()
        _vote_for_everyone(service, owners, {role: n for n, role in ROLE_OF.items()})
        first = service.finalize_council()

        assert service.make_council_proposal() == first.cycle_id + 1
        assert service.phase is ElectionPhase.VOTING
        assert all(
            count == 0
            for standing in service.get_council_votes().values()
            for _, count in standing
        )

        with pytest.raises(IncompleteVotingError) as exc_info:
            service.finalize_council()
        assert len(exc_info.value.missing) == 9
        assert service.get_council_members() == first


class TestTies:
    """Two candidates for one role with split votes."""

    @pytest.fixture
    def split_service(
        self,
        make_service: Callable[..., ResidenceService],
        builder: Builder,
    ) -> Callable[[ElectionConfig], tuple[ResidenceService, dict[int, Principal]]]:
        def _make(config: ElectionConfig) -> tuple[ResidenceService, dict[int, Principal]]:
            service = make_service(config=config, apartments_count=4)
            owners = {n: Principal(f"owner-{n}") for n in (1, 2, 3, 4)}
            service.add_apartment(4, "Apt 4", owners[4], builder.identity)
            service.apply_for_council(2, CouncilRole.CHAIRMAN, owners[2])
            service.apply_for_council(3, CouncilRole.CHAIRMAN, owners[3])
            service.apply_for_council(1, CouncilRole.TREASURER, owners[1])
            service.apply_for_council(4, CouncilRole.CONTROLLER, owners[4])
            service.make_council_proposal()
            for voter, owner in owners.items():
                chairman = 3 if voter in (1, 2) else 2
                service.vote_for_council(voter, chairman, CouncilRole.CHAIRMAN, owner)
                service.vote_for_council(voter, 1, CouncilRole.TREASURER, owner)
                service.vote_for_council(voter, 4, CouncilRole.CONTROLLER, owner)
            return service, owners

        return _make

    def test_lowest_apartment_wins(self, split_service) -> None:
        service, owners = split_service(ElectionConfig())

        result = service.finalize_council()

        chairman = result.tally_for(CouncilRole.CHAIRMAN)
        assert chairman.winner == 2
        assert chairman.tied_apartments == (2, 3)
        assert chairman.tie_broken
        assert chairman.tie_break_policy is TieBreakPolicy.LOWEST_APARTMENT_NUMBER
        assert result.owner_for(CouncilRole.CHAIRMAN) == owners[2]

    def test_reject_policy_leaves_voting_open(self, split_service) -> None:
        service, owners = split_service(
            ElectionConfig(tie_break_policy=TieBreakPolicy.REJECT)
        )

        with pytest.raises(TieNotResolvedError) as exc_info:
            service.finalize_council()

        assert exc_info.value.tied_apartments == (2, 3)
        assert service.phase is ElectionPhase.VOTING
        assert service.get_council_history() == []

        # One resident changes their mind; the tie is gone.
        service.vote_for_council(1, 2, CouncilRole.CHAIRMAN, owners[1])
        assert service.finalize_council().winner_for(CouncilRole.CHAIRMAN) == 2


class TestSuccessiveTerms:
    """A second term after a finalized council."""

    def test_second_term(
        self,
        service: ResidenceService,
        owners: dict[int, Principal],
    ) -> None:
        _apply_one_role_each(service, owners)
        service.make_council_proposal()
        _vote_for_everyone(service, owners, {role: n for n, role in ROLE_OF.items()})
        first = service.finalize_council()

        service.open_applications()
        rotated = {1: CouncilRole.TREASURER, 2: CouncilRole.CONTROLLER, 3: CouncilRole.CHAIRMAN}
        for number, role in rotated.items():
            service.apply_for_council(number, role, owners[number])
        service.make_council_proposal()
        _vote_for_everyone(service, owners, {role: n for n, role in rotated.items()})
        second = service.finalize_council()

        assert second.cycle_id > first.cycle_id
        assert second.members[CouncilRole.CHAIRMAN] == 3
        assert service.get_council_members() == second
        assert [r.cycle_id for r in service.get_council_history()] == [
            first.cycle_id,
            second.cycle_id,
        ]

    def test_strict_rules_reject_self_votes(
        self,
        make_service: Callable[..., ResidenceService],
        owners: dict[int, Principal],
    ) -> None:
        service = make_service(config=STRICT_ELECTION_CONFIG)
        _apply_one_role_each(service, owners)
        service.make_council_proposal()

        with pytest.raises(SelfVoteNotAllowedError):
            service.vote_for_council(1, 1, CouncilRole.CHAIRMAN, owners[1])


def test_expenses_recorded(service: ResidenceService, expenses: list[MaintenanceExpense]) -> None:
    assert service.get_residence().maintenance_expenses == tuple(expenses)
