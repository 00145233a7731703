"""Apartment repository protocol.

Storage interface for registered apartments. Authorization and
validation belong to the registry service; the repository only stores
and retrieves.
"""

from __future__ import annotations

from typing import Protocol

from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Apartment


class ApartmentRepositoryProtocol(Protocol):
    """Protocol for apartment storage, keyed by apartment number."""

    def save(self, apartment: Apartment) -> None:
        """Store an apartment, keyed by its number.

        Args:
            apartment: The apartment to store.
        """
        ...

    def get(self, number: int) -> Apartment | None:
        """Retrieve an apartment by number.

        Args:
            number: Apartment number.

        Returns:
            The Apartment if registered, None otherwise.
        """
        ...

    def exists(self, number: int) -> bool:
        """Check whether an apartment number is registered."""
        ...

    def count(self) -> int:
        """Return the number of registered apartments."""
        ...

    def list_all(self) -> list[Apartment]:
        """Return all apartments ordered by number ascending."""
        ...

    def list_by_owner(self, owner: Principal) -> list[Apartment]:
        """Return the apartments held by an owner, ordered by number."""
        ...
