"""Application services for the residence council."""

from residence_council.application.services.election_service import ElectionService
from residence_council.application.services.registry_service import RegistryService
from residence_council.application.services.residence_service import ResidenceService
from residence_council.application.services.tally_service import TallyService

__all__: list[str] = [
    "ElectionService",
    "RegistryService",
    "ResidenceService",
    "TallyService",
]
