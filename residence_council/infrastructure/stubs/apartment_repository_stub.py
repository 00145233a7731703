"""Apartment repository stub implementation.

In-memory implementation of ApartmentRepositoryProtocol. Storage engines
are out of scope for the residence council, so this is the repository
wired by default.
"""

from __future__ import annotations

from residence_council.application.ports.apartment_repository import (
    ApartmentRepositoryProtocol,
)
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Apartment

DEV_MODE_WATERMARK: str = "DEV_STUB:ApartmentRepositoryStub:v1"


class ApartmentRepositoryStub(ApartmentRepositoryProtocol):
    """In-memory apartment storage keyed by apartment number.

    Attributes:
        _apartments: Dictionary of apartment number -> Apartment.
    """

    def __init__(self) -> None:
        """Initialize empty apartment storage."""
        self._apartments: dict[int, Apartment] = {}

    def save(self, apartment: Apartment) -> None:
        self._apartments[apartment.number] = apartment

    def get(self, number: int) -> Apartment | None:
        return self._apartments.get(number)

    def exists(self, number: int) -> bool:
        return number in self._apartments

    def count(self) -> int:
        return len(self._apartments)

    def list_all(self) -> list[Apartment]:
        return [self._apartments[number] for number in sorted(self._apartments)]

    def list_by_owner(self, owner: Principal) -> list[Apartment]:
        return [apartment for apartment in self.list_all() if apartment.owner == owner]

    def clear(self) -> None:
        """Clear all stored apartments (for testing)."""
        self._apartments.clear()
