"""Domain errors for the residence council.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ResidenceError.
"""

from residence_council.domain.errors.application import DuplicateApplicationError
from residence_council.domain.errors.election import (
    ElectionError,
    IncompleteVotingError,
    InvalidElectionStateError,
    NoApplicationsError,
    NotACandidateError,
    NotFinalizedError,
    NoVotesCastError,
    SelfVoteNotAllowedError,
    TieNotResolvedError,
)
from residence_council.domain.errors.registry import (
    ApartmentCapacityExceededError,
    ApartmentNotFoundError,
    DuplicateApartmentError,
    InvalidApartmentError,
    RegistryError,
    UnauthorizedError,
)
from residence_council.domain.errors.residence import (
    AlreadyInitializedError,
    InvalidResidenceError,
    NotInitializedError,
)
from residence_council.domain.exceptions import ResidenceError

__all__: list[str] = [
    "AlreadyInitializedError",
    "ApartmentCapacityExceededError",
    "ApartmentNotFoundError",
    "DuplicateApartmentError",
    "DuplicateApplicationError",
    "ElectionError",
    "IncompleteVotingError",
    "InvalidApartmentError",
    "InvalidElectionStateError",
    "InvalidResidenceError",
    "NoApplicationsError",
    "NotACandidateError",
    "NotFinalizedError",
    "NotInitializedError",
    "NoVotesCastError",
    "RegistryError",
    "ResidenceError",
    "SelfVoteNotAllowedError",
    "TieNotResolvedError",
    "UnauthorizedError",
]
