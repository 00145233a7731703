"""Council applications and the per-cycle application book.

An apartment owner applies for one council role. The owner identity, not
the apartment, is the unit of uniqueness: an owner of several apartments
still holds a single application across all roles.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from residence_council.domain.errors.application import DuplicateApplicationError
from residence_council.domain.errors.registry import UnauthorizedError
from residence_council.domain.models.council_role import CouncilRole
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Apartment


@dataclass(frozen=True, eq=True)
class CouncilApplication:
    """An apartment's candidacy for a council role.

    Attributes:
        apartment_number: The applying apartment.
        role: The role applied for.
    """

    apartment_number: int
    role: CouncilRole

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.apartment_number, self.role.rank)


class ApplicationListing(Iterable[CouncilApplication]):
    """Restartable, ordered view over the applications of a book.

    Each iteration re-reads the book, so a listing obtained before
    voting reflects applications recorded later. Order is apartment
    number ascending, then role order.
    """

    def __init__(self, applications: dict[Principal, CouncilApplication]) -> None:
        self._applications = applications

    def __iter__(self) -> Iterator[CouncilApplication]:
        yield from sorted(self._applications.values(), key=lambda a: a.sort_key)

    def __len__(self) -> int:
        return len(self._applications)

    def __bool__(self) -> bool:
        return bool(self._applications)


class ApplicationBook:
    """Applications recorded for the current cycle, keyed by owner identity."""

    def __init__(self) -> None:
        self._applications: dict[Principal, CouncilApplication] = {}

    def apply(
        self,
        apartment: Apartment,
        role: CouncilRole,
        caller: Principal,
    ) -> CouncilApplication:
        """Record an application for a council role.

        Args:
            apartment: The registered apartment applying.
            role: The role applied for.
            caller: Identity making the call.

        Returns:
            The recorded CouncilApplication.

        Raises:
            UnauthorizedError: If caller does not own the apartment.
            DuplicateApplicationError: If caller already holds an application.
        """
        if not apartment.is_owned_by(caller):
            raise UnauthorizedError(
                caller,
                f"apply for a council role on behalf of apartment {apartment.number}",
            )

        existing = self._applications.get(caller)
        if existing is not None:
            raise DuplicateApplicationError(
                owner=caller,
                existing_role=existing.role,
                requested_role=role,
            )

        application = CouncilApplication(apartment_number=apartment.number, role=role)
        self._applications[caller] = application
        return application

    def list_applications(self) -> ApplicationListing:
        """Return an ordered, restartable listing of all applications."""
        return ApplicationListing(self._applications)

    def candidates(self, role: CouncilRole) -> tuple[int, ...]:
        """Apartment numbers that applied for a role, ascending."""
        return tuple(
            sorted(
                application.apartment_number
                for application in self._applications.values()
                if application.role == role
            )
        )

    def is_candidate(self, apartment_number: int, role: CouncilRole) -> bool:
        return apartment_number in self.candidates(role)

    def application_of(self, owner: Principal) -> CouncilApplication | None:
        return self._applications.get(owner)

    def is_empty(self) -> bool:
        return not self._applications

    def reset(self) -> int:
        """Discard every application so owners may apply afresh.

        Returns:
            Number of applications discarded.
        """
        discarded = len(self._applications)
        self._applications.clear()
        return discarded

    def __len__(self) -> int:
        return len(self._applications)
