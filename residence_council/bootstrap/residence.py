"""Bootstrap wiring for residence dependencies.

Builds a ResidenceService from its collaborators. Configuration is read
from the environment after loading a local .env file, if present.
"""

from __future__ import annotations

from dotenv import load_dotenv

from residence_council.application.ports.apartment_repository import (
    ApartmentRepositoryProtocol,
)
from residence_council.application.ports.council_result_repository import (
    CouncilResultRepositoryProtocol,
)
from residence_council.application.services.election_service import ElectionService
from residence_council.application.services.registry_service import RegistryService
from residence_council.application.services.residence_service import ResidenceService
from residence_council.application.services.tally_service import TallyService
from residence_council.config.election_config import ElectionConfig
from residence_council.infrastructure.stubs.apartment_repository_stub import (
    ApartmentRepositoryStub,
)
from residence_council.infrastructure.stubs.council_result_repository_stub import (
    CouncilResultRepositoryStub,
)

_residence_service: ResidenceService | None = None


def get_election_config() -> ElectionConfig:
    """Load election configuration from .env and the environment."""
    load_dotenv()
    return ElectionConfig.from_environment()


def create_residence_service(
    config: ElectionConfig | None = None,
    apartment_repository: ApartmentRepositoryProtocol | None = None,
    result_repository: CouncilResultRepositoryProtocol | None = None,
) -> ResidenceService:
    """Build a fresh, uninitialized residence.

    Args:
        config: Election rules; read from the environment when omitted.
        apartment_repository: Apartment storage; in-memory when omitted.
        result_repository: Council result storage; in-memory when omitted.

    Returns:
        A ResidenceService in the IDLE phase.
    """
    config = config if config is not None else get_election_config()
    registry = RegistryService(apartment_repository or ApartmentRepositoryStub())
    election = ElectionService(
        registry=registry,
        tally=TallyService(tie_break_policy=config.tie_break_policy),
        results=result_repository or CouncilResultRepositoryStub(),
        config=config,
    )
    return ResidenceService(registry=registry, election=election)


def get_residence_service() -> ResidenceService:
    """Get the process-wide residence service instance."""
    global _residence_service
    if _residence_service is None:
        _residence_service = create_residence_service()
    return _residence_service


def reset_residence_service() -> None:
    """Drop the process-wide instance (for testing)."""
    global _residence_service
    _residence_service = None


__all__ = [
    "create_residence_service",
    "get_election_config",
    "get_residence_service",
    "reset_residence_service",
]
