"""Domain models for the residence council.

Contains value objects and domain models that represent core
governance concepts. Stateful collections and the election cycle live in
their own modules and are imported from there directly.
"""

from residence_council.domain.models.council_role import ALL_ROLES, CouncilRole
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import (
    Apartment,
    Builder,
    MaintenanceExpense,
    Residence,
)
from residence_council.domain.models.vote import Vote

__all__: list[str] = [
    "ALL_ROLES",
    "Apartment",
    "Builder",
    "CouncilRole",
    "MaintenanceExpense",
    "Principal",
    "Residence",
    "Vote",
]
