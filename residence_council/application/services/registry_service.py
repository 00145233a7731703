"""Apartment registry service.

The registry owns the residence record, the builder identity and the
apartment set. It is the only writer of apartments; the election reads
apartments and owners through it.
"""

from __future__ import annotations

import structlog

from residence_council.application.ports.apartment_repository import (
    ApartmentRepositoryProtocol,
)
from residence_council.domain.errors.registry import (
    ApartmentCapacityExceededError,
    ApartmentNotFoundError,
    DuplicateApartmentError,
    InvalidApartmentError,
    UnauthorizedError,
)
from residence_council.domain.errors.residence import (
    AlreadyInitializedError,
    NotInitializedError,
)
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Apartment, Builder, Residence

logger = structlog.get_logger(__name__)


class RegistryService:
    """Registry of the residence and its apartments.

    Attributes:
        _repository: Apartment storage.
        _residence: Residence record, set once.
        _builder: Builder allowed to add apartments, set once.
    """

    def __init__(self, repository: ApartmentRepositoryProtocol) -> None:
        """Initialize the registry.

        Args:
            repository: Storage for registered apartments.
        """
        self._repository = repository
        self._residence: Residence | None = None
        self._builder: Builder | None = None
        self._log = logger.bind(component="registry")

    @property
    def is_initialized(self) -> bool:
        return self._residence is not None

    @property
    def residence(self) -> Residence:
        """The residence record.

        Raises:
            NotInitializedError: If the residence was never set up.
        """
        if self._residence is None:
            raise NotInitializedError("reading the residence")
        return self._residence

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            raise NotInitializedError("reading the builder")
        return self._builder

    def initialize(self, residence: Residence, builder: Builder) -> None:
        """Record the residence and its builder.

        Raises:
            AlreadyInitializedError: If a residence is already recorded.
        """
        if self._residence is not None:
            self._log.warning(
                "residence_already_initialized",
                residence_name=self._residence.name,
            )
            raise AlreadyInitializedError(self._residence.name)

        self._residence = residence
        self._builder = builder
        self._log.info(
            "residence_initialized",
            residence_name=residence.name,
            apartments_count=residence.apartments_count,
            expenses_count=len(residence.maintenance_expenses),
            builder=str(builder.identity),
        )

    def add_apartment(
        self,
        number: int,
        name: str,
        owner: Principal,
        caller: Principal,
    ) -> Apartment:
        """Register a new apartment.

        Checks, in order: builder authorization, field validity, number
        uniqueness, residence capacity.

        Args:
            number: Apartment number, positive and unique.
            name: Apartment label.
            owner: Owner identity.
            caller: Identity making the call.

        Returns:
            The registered Apartment.

        Raises:
            NotInitializedError: If the residence was never set up.
            UnauthorizedError: If caller is not the builder.
            InvalidApartmentError: If number or name is invalid.
            DuplicateApartmentError: If the number is already registered.
            ApartmentCapacityExceededError: If the residence is full.
        """
        residence = self.residence
        log = self._log.bind(apartment_number=number)

        if caller != self.builder.identity:
            log.warning("add_apartment_unauthorized", caller=str(caller))
            raise UnauthorizedError(caller, "add apartments")

        try:
            apartment = Apartment(number=number, name=name, owner=owner)
        except ValueError as exc:
            log.warning("add_apartment_invalid", reason=str(exc))
            raise InvalidApartmentError(number, str(exc)) from exc

        if self._repository.exists(number):
            log.warning("add_apartment_duplicate")
            raise DuplicateApartmentError(number)

        if self._repository.count() >= residence.apartments_count:
            log.warning("add_apartment_capacity_exceeded", capacity=residence.apartments_count)
            raise ApartmentCapacityExceededError(residence.apartments_count)

        self._repository.save(apartment)
        log.info("apartment_added", owner=str(owner))
        return apartment

    def get_apartment(self, number: int) -> Apartment:
        """Look up an apartment.

        Raises:
            ApartmentNotFoundError: If the number is not registered.
        """
        apartment = self._repository.get(number)
        if apartment is None:
            self._log.warning("apartment_not_found", apartment_number=number)
            raise ApartmentNotFoundError(number)
        return apartment

    def owner_of(self, number: int) -> Principal:
        return self.get_apartment(number).owner

    def apartment_count(self) -> int:
        return self._repository.count()

    def list_apartments(self) -> list[Apartment]:
        return self._repository.list_all()

    def apartment_numbers(self) -> list[int]:
        return [apartment.number for apartment in self._repository.list_all()]

    def owned_by(self, identity: Principal) -> list[int]:
        """Apartment numbers held by an identity, ascending."""
        return [apartment.number for apartment in self._repository.list_by_owner(identity)]
