"""Application ports (protocols) for the residence council."""

from residence_council.application.ports.apartment_repository import (
    ApartmentRepositoryProtocol,
)
from residence_council.application.ports.council_result_repository import (
    CouncilResultRepositoryProtocol,
)
from residence_council.application.ports.tally import TallyProtocol

__all__: list[str] = [
    "ApartmentRepositoryProtocol",
    "CouncilResultRepositoryProtocol",
    "TallyProtocol",
]
