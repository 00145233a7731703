"""Residence lifecycle errors."""

from __future__ import annotations

from residence_council.domain.exceptions import ResidenceError


class AlreadyInitializedError(ResidenceError):
    """Raised when a residence is set up a second time.

    Attributes:
        residence_name: Name of the residence already in place.
    """

    def __init__(self, residence_name: str) -> None:
        self.residence_name = residence_name
        super().__init__(f"Residence {residence_name!r} is already initialized")


class NotInitializedError(ResidenceError):
    """Raised when an operation needs a residence that was never set up."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Residence must be initialized before {operation}")


class InvalidResidenceError(ResidenceError):
    """Raised when residence setup parameters fail validation.

    Attributes:
        reason: Why the setup was rejected.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid residence setup: {reason}")
