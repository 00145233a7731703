"""In-memory stub implementations of the application ports."""

from residence_council.infrastructure.stubs.apartment_repository_stub import (
    ApartmentRepositoryStub,
)
from residence_council.infrastructure.stubs.council_result_repository_stub import (
    CouncilResultRepositoryStub,
)

__all__: list[str] = [
    "ApartmentRepositoryStub",
    "CouncilResultRepositoryStub",
]
