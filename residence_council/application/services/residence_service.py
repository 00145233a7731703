"""Residence service: the call surface of the residence council.

The hosting platform delivers one call at a time, each with an
authenticated caller principal. Every public method here is one such
call: it runs to completion inside its own log context (fresh correlation
ID, operation name, caller) and either commits or raises without changing
state.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from residence_council.application.services.election_service import ElectionService
from residence_council.application.services.registry_service import RegistryService
from residence_council.domain.errors.residence import (
    InvalidResidenceError,
    NotInitializedError,
)
from residence_council.domain.models.council_application import (
    ApplicationListing,
    CouncilApplication,
)
from residence_council.domain.models.council_result import CouncilResult
from residence_council.domain.models.council_role import CouncilRole
from residence_council.domain.models.election_cycle import ElectionPhase
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import (
    Apartment,
    Builder,
    MaintenanceExpense,
    Residence,
)
from residence_council.domain.models.vote import Vote
from residence_council.infrastructure.observability.logging import call_context

logger = structlog.get_logger(__name__)


class ResidenceService:
    """Public operations of one residence instance.

    All state (registry, applications, votes, results) belongs to this
    instance; residences never share state.
    """

    def __init__(self, registry: RegistryService, election: ElectionService) -> None:
        """Initialize the residence service.

        Args:
            registry: Residence and apartment registry.
            election: Council election state machine.
        """
        self._registry = registry
        self._election = election
        self._log = logger.bind(component="residence")

    @property
    def phase(self) -> ElectionPhase:
        return self._election.phase

    @property
    def cycle_id(self) -> int:
        return self._election.cycle_id

    def _require_initialized(self, operation: str) -> None:
        if not self._registry.is_initialized:
            self._log.warning("residence_not_initialized")
            raise NotInitializedError(operation)

    # Setup

    def initialize_residence(
        self,
        name: str,
        apartments_count: int,
        builder: Builder,
        maintenance_expenses: Sequence[MaintenanceExpense],
    ) -> Residence:
        """Set up the residence and open the first application window.

        Args:
            name: Residence name, non-empty.
            apartments_count: Maximum number of apartments, positive.
            builder: Builder allowed to register apartments.
            maintenance_expenses: Shared expenses, at least one.

        Returns:
            The recorded Residence.

        Raises:
            AlreadyInitializedError: If called a second time.
            InvalidResidenceError: If any parameter fails validation.
            InvalidElectionStateError: If the election left IDLE before setup.
        """
        with call_context("initialize_residence", str(builder.identity)):
            try:
                residence = Residence(
                    name=name,
                    apartments_count=apartments_count,
                    maintenance_expenses=tuple(maintenance_expenses),
                )
            except ValueError as exc:
                self._log.warning("residence_invalid", reason=str(exc))
                raise InvalidResidenceError(str(exc)) from exc

            if not self._registry.is_initialized:
                self._election.cycle.require_phase(
                    "initialize the residence", ElectionPhase.IDLE
                )
            self._registry.initialize(residence, builder)
            self._election.start_collecting()
            return residence

    def get_residence(self) -> Residence:
        with call_context("get_residence"):
            return self._registry.residence

    def add_apartment(
        self,
        number: int,
        name: str,
        owner: Principal,
        caller: Principal,
    ) -> Apartment:
        """Register an apartment (builder only)."""
        with call_context("add_apartment", str(caller)):
            self._require_initialized("adding apartments")
            return self._registry.add_apartment(number, name, owner, caller)

    def get_apartments(self) -> list[Apartment]:
        with call_context("get_apartments"):
            return self._registry.list_apartments()

    # Applications

    def apply_for_council(
        self,
        apartment_number: int,
        role: CouncilRole,
        caller: Principal,
    ) -> CouncilApplication:
        """Apply for a council role on behalf of an owned apartment."""
        with call_context("apply_for_council", str(caller)):
            self._require_initialized("applying for the council")
            return self._election.apply_for_council(apartment_number, role, caller)

    def get_council_applications(self) -> ApplicationListing:
        with call_context("get_council_applications"):
            return self._election.list_applications()

    def open_applications(self) -> None:
        """Start a new term's application window after a finalized cycle.

        Raises:
            InvalidElectionStateError: If the current cycle is not FINALIZED.
        """
        with call_context("open_applications"):
            self._election.open_applications()

    # Voting

    def make_council_proposal(self) -> int:
        """Open voting on the collected applications.

        Returns:
            Identifier of the new election cycle.
        """
        with call_context("make_council_proposal"):
            return self._election.make_council_proposal()

    def vote_for_council(
        self,
        voter_apartment: int,
        target_apartment: int,
        role: CouncilRole,
        caller: Principal,
    ) -> Vote:
        """Cast or replace a vote for a council role."""
        with call_context("vote_for_council", str(caller)):
            return self._election.vote_for_council(
                voter_apartment, target_apartment, role, caller
            )

    def get_council_votes(self) -> dict[CouncilRole, tuple[tuple[int, int], ...]]:
        with call_context("get_council_votes"):
            return self._election.get_council_votes()

    def finalize_council(self) -> CouncilResult:
        """Tally the current cycle and store the elected council."""
        with call_context("finalize_council"):
            return self._election.finalize()

    # Results

    def get_council_members(self) -> CouncilResult:
        with call_context("get_council_members"):
            return self._election.get_council_members()

    def get_council_history(self) -> list[CouncilResult]:
        with call_context("get_council_history"):
            return self._election.get_council_history()

    def whoami(self, caller: Principal) -> Principal:
        """Echo the caller's identity as seen by the residence."""
        with call_context("whoami", str(caller)):
            return caller
