"""Council election service.

This module implements the proposal/voting state machine of the council
election. It consumes the application book, records one vote per
(voter, role), checks completeness and hands the votes to the tally on
finalize.

Every operation validates before it mutates: a rejected call leaves the
cycle, the application book and the stored results untouched.

Phases:
    IDLE -> COLLECTING -> VOTING -> FINALIZED
    A new proposal moves COLLECTING, VOTING or FINALIZED to VOTING with
    a fresh cycle. start_collecting opens the first window after setup;
    open_applications moves FINALIZED back to COLLECTING.
"""

from __future__ import annotations

import structlog

from residence_council.application.ports.council_result_repository import (
    CouncilResultRepositoryProtocol,
)
from residence_council.application.ports.tally import TallyProtocol
from residence_council.application.services.registry_service import RegistryService
from residence_council.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    ElectionConfig,
)
from residence_council.domain.errors.application import DuplicateApplicationError
from residence_council.domain.errors.election import (
    IncompleteVotingError,
    NoApplicationsError,
    NotACandidateError,
    NotFinalizedError,
    SelfVoteNotAllowedError,
)
from residence_council.domain.errors.registry import UnauthorizedError
from residence_council.domain.models.council_application import (
    ApplicationBook,
    ApplicationListing,
    CouncilApplication,
)
from residence_council.domain.models.council_result import CouncilResult
from residence_council.domain.models.council_role import ALL_ROLES, CouncilRole
from residence_council.domain.models.election_cycle import ElectionCycle, ElectionPhase
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.vote import Vote

logger = structlog.get_logger(__name__)


class ElectionService:
    """The council election state machine.

    Attributes:
        _registry: Apartment and owner lookup.
        _tally: Vote counting.
        _results: Storage for finalized council results.
        _config: Self-vote and tie-break rules.
        _book: Applications of the current cycle.
        _cycle: Current election cycle snapshot.
    """

    def __init__(
        self,
        registry: RegistryService,
        tally: TallyProtocol,
        results: CouncilResultRepositoryProtocol,
        config: ElectionConfig = DEFAULT_ELECTION_CONFIG,
    ) -> None:
        """Initialize the election in the IDLE phase.

        Args:
            registry: Apartment and owner lookup.
            tally: Vote counting used by finalize.
            results: Storage for finalized council results.
            config: Election rules.
        """
        self._registry = registry
        self._tally = tally
        self._results = results
        self._config = config
        self._book = ApplicationBook()
        self._cycle = ElectionCycle()
        self._log = logger.bind(component="election")

    @property
    def phase(self) -> ElectionPhase:
        return self._cycle.phase

    @property
    def cycle_id(self) -> int:
        return self._cycle.cycle_id

    @property
    def cycle(self) -> ElectionCycle:
        return self._cycle

    @property
    def config(self) -> ElectionConfig:
        return self._config

    def start_collecting(self) -> None:
        """Open the first application window once the residence is set up.

        Raises:
            InvalidElectionStateError: If the election has already started.
        """
        self._cycle.require_phase("start collecting applications", ElectionPhase.IDLE)
        self._cycle = self._cycle.with_phase(ElectionPhase.COLLECTING)
        self._log.info("applications_opened", cycle_id=self._cycle.cycle_id)

    def open_applications(self) -> None:
        """Start a new term after a finalized cycle.

        The previous applications are discarded so owners may apply afresh.

        Raises:
            InvalidElectionStateError: If the current cycle is not FINALIZED.
        """
        self._cycle.require_phase("open applications", ElectionPhase.FINALIZED)
        next_cycle = self._cycle.with_phase(ElectionPhase.COLLECTING)

        discarded = self._book.reset()
        self._cycle = next_cycle
        if discarded:
            self._log.warning(
                "applications_discarded",
                cycle_id=self._cycle.cycle_id,
                discarded_applications=discarded,
            )
        self._log.info(
            "applications_opened",
            cycle_id=self._cycle.cycle_id,
            discarded_applications=discarded,
        )

    def apply_for_council(
        self,
        apartment_number: int,
        role: CouncilRole,
        caller: Principal,
    ) -> CouncilApplication:
        """Record an application for a council role.

        Args:
            apartment_number: The applying apartment.
            role: The role applied for.
            caller: Identity making the call.

        Returns:
            The recorded CouncilApplication.

        Raises:
            InvalidElectionStateError: If the residence is not set up yet.
            ApartmentNotFoundError: If the apartment is unknown.
            UnauthorizedError: If caller does not own the apartment.
            DuplicateApplicationError: If caller already holds an application.
        """
        self._cycle.require_phase(
            "apply for the council",
            ElectionPhase.COLLECTING,
            ElectionPhase.VOTING,
            ElectionPhase.FINALIZED,
        )
        log = self._log.bind(apartment_number=apartment_number, role=role.value)

        apartment = self._registry.get_apartment(apartment_number)
        try:
            application = self._book.apply(apartment, role, caller)
        except UnauthorizedError:
            log.warning("application_unauthorized", caller=str(caller))
            raise
        except DuplicateApplicationError as exc:
            log.warning(
                "application_duplicate",
                caller=str(caller),
                existing_role=exc.existing_role.value,
            )
            raise

        log.info("application_recorded", cycle_id=self._cycle.cycle_id)
        return application

    def list_applications(self) -> ApplicationListing:
        """Applications of the current cycle, apartment then role order."""
        return self._book.list_applications()

    def candidates(self, role: CouncilRole) -> tuple[int, ...]:
        return self._book.candidates(role)

    def make_council_proposal(self) -> int:
        """Open voting on the collected applications.

        Applications are kept; the vote ledger is replaced by an empty one
        and the cycle identifier is incremented.

        Returns:
            The identifier of the new cycle.

        Raises:
            InvalidElectionStateError: If the residence is not set up yet.
            NoApplicationsError: If no role has any application.
        """
        next_cycle = self._cycle.next_cycle()
        if self._book.is_empty():
            self._log.warning("proposal_without_applications")
            raise NoApplicationsError()

        discarded_votes = len(self._cycle.votes)
        self._cycle = next_cycle
        self._log.info(
            "council_proposal_made",
            cycle_id=next_cycle.cycle_id,
            applications=len(self._book),
            discarded_votes=discarded_votes,
        )
        return next_cycle.cycle_id

    def vote_for_council(
        self,
        voter_apartment: int,
        target_apartment: int,
        role: CouncilRole,
        caller: Principal,
    ) -> Vote:
        """Record a vote, replacing any earlier vote for the same voter and role.

        Checks, in order: phase, voter and target existence, target
        candidacy, caller ownership of the voter, self-vote permission.

        Args:
            voter_apartment: Apartment casting the vote.
            target_apartment: Candidate apartment voted for.
            role: Role the vote is for.
            caller: Identity making the call.

        Returns:
            The recorded Vote.

        Raises:
            InvalidElectionStateError: If voting is not open.
            ApartmentNotFoundError: If either apartment is unknown.
            NotACandidateError: If the target did not apply for the role.
            UnauthorizedError: If caller does not own the voter apartment.
            SelfVoteNotAllowedError: If self-votes are disabled.
        """
        self._cycle.require_phase("vote for the council", ElectionPhase.VOTING)
        log = self._log.bind(
            cycle_id=self._cycle.cycle_id,
            voter_apartment=voter_apartment,
            target_apartment=target_apartment,
            role=role.value,
        )

        voter = self._registry.get_apartment(voter_apartment)
        self._registry.get_apartment(target_apartment)

        if not self._book.is_candidate(target_apartment, role):
            log.warning("vote_for_non_candidate")
            raise NotACandidateError(target_apartment, role)

        if not voter.is_owned_by(caller):
            log.warning("vote_unauthorized", caller=str(caller))
            raise UnauthorizedError(
                caller, f"vote on behalf of apartment {voter_apartment}"
            )

        vote = Vote(
            voter_apartment=voter_apartment,
            target_apartment=target_apartment,
            role=role,
            cycle_id=self._cycle.cycle_id,
        )
        if vote.is_self_vote and not self._config.allow_self_vote:
            log.warning("self_vote_rejected")
            raise SelfVoteNotAllowedError(voter_apartment, role)

        replaced = self._cycle.vote_of(voter_apartment, role)
        self._cycle = self._cycle.with_vote(vote)
        log.info(
            "vote_recorded",
            replaced_target=replaced.target_apartment if replaced else None,
        )
        return vote

    def missing_votes(self) -> tuple[tuple[int, CouncilRole], ...]:
        """(apartment, role) pairs still without a vote in this cycle."""
        return self._cycle.missing_votes(self._registry.apartment_numbers())

    def finalize(self) -> CouncilResult:
        """Compute and store the council for the current cycle.

        Returns:
            The stored CouncilResult.

        Raises:
            InvalidElectionStateError: If voting is not open.
            IncompleteVotingError: If any apartment has not voted for every role.
            TieNotResolvedError: If the tie-break policy rejects a tie.
        """
        self._cycle.require_phase("finalize the council", ElectionPhase.VOTING)
        log = self._log.bind(cycle_id=self._cycle.cycle_id)

        missing = self.missing_votes()
        if missing:
            log.warning("finalize_incomplete_voting", missing_count=len(missing))
            raise IncompleteVotingError(missing)

        tallies = self._tally.tally_all(self._cycle.votes)
        owners = tuple(
            (tally.role, self._registry.owner_of(tally.winner)) for tally in tallies
        )
        result = CouncilResult(
            cycle_id=self._cycle.cycle_id,
            tallies=tallies,
            owners=owners,
        )
        finalized_cycle = self._cycle.with_phase(ElectionPhase.FINALIZED)

        self._results.save(result)
        self._cycle = finalized_cycle
        log.info(
            "council_finalized",
            members={role.value: number for role, number in result.members.items()},
            ties_broken=[t.role.value for t in tallies if t.tie_broken],
        )
        return result

    def get_council_members(self) -> CouncilResult:
        """The most recently finalized council.

        Raises:
            NotFinalizedError: If no cycle has been finalized.
        """
        result = self._results.get_latest()
        if result is None:
            raise NotFinalizedError()
        return result

    def get_council_history(self) -> list[CouncilResult]:
        return self._results.list_all()

    def get_council_votes(self) -> dict[CouncilRole, tuple[tuple[int, int], ...]]:
        """Current vote counts per role.

        Every candidate appears, with zero when nobody voted for it yet.

        Returns:
            Mapping of role to (apartment_number, votes) pairs, apartment ascending.
        """
        standings: dict[CouncilRole, tuple[tuple[int, int], ...]] = {}
        for role in ALL_ROLES:
            counts = dict.fromkeys(self._book.candidates(role), 0)
            for vote in self._cycle.votes_for_role(role):
                counts[vote.target_apartment] = counts.get(vote.target_apartment, 0) + 1
            standings[role] = tuple(sorted(counts.items()))
        return standings
