"""Apartment registry errors.

This module defines errors raised when registering or looking up
apartments. Only the builder may register apartments, and apartment
numbers are unique within a residence.
"""

from __future__ import annotations

from residence_council.domain.exceptions import ResidenceError
from residence_council.domain.models.principal import Principal


class RegistryError(ResidenceError):
    """Base class for apartment registry errors."""

    pass


class UnauthorizedError(ResidenceError):
    """Raised when a caller is not allowed to perform an operation.

    Used both for builder-only registry operations and for owner-only
    application and voting operations.

    Attributes:
        caller: The principal that attempted the operation.
        action: Short description of the rejected action.
    """

    def __init__(self, caller: Principal, action: str) -> None:
        """Initialize UnauthorizedError.

        Args:
            caller: The principal that attempted the operation.
            action: Short description of the rejected action.
        """
        self.caller = caller
        self.action = action
        super().__init__(f"Caller {caller} is not authorized to {action}")


class ApartmentNotFoundError(RegistryError):
    """Raised when an apartment number is not registered.

    Attributes:
        apartment_number: The unknown apartment number.
    """

    def __init__(self, apartment_number: int) -> None:
        self.apartment_number = apartment_number
        super().__init__(f"Apartment {apartment_number} does not exist")


class DuplicateApartmentError(RegistryError):
    """Raised when registering an apartment number twice.

    Attributes:
        apartment_number: The already registered apartment number.
    """

    def __init__(self, apartment_number: int) -> None:
        self.apartment_number = apartment_number
        super().__init__(f"Apartment number {apartment_number} is already added")


class InvalidApartmentError(RegistryError):
    """Raised when apartment fields fail validation.

    Attributes:
        apartment_number: The apartment number that was submitted.
        reason: Why the apartment was rejected.
    """

    def __init__(self, apartment_number: int, reason: str) -> None:
        self.apartment_number = apartment_number
        self.reason = reason
        super().__init__(f"Invalid apartment {apartment_number}: {reason}")


class ApartmentCapacityExceededError(RegistryError):
    """Raised when the residence already holds its declared apartment count.

    Attributes:
        capacity: Number of apartments declared at residence setup.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Cannot add more than {capacity} apartments")
