"""
Pytest configuration and shared fixtures for residence council tests.

Testing Standards:
- Unit tests go in tests/unit/
- Integration (end-to-end election) tests go in tests/integration/
- Services are built through bootstrap wiring with an explicit config
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from residence_council.application.services.residence_service import ResidenceService
from residence_council.bootstrap.residence import create_residence_service
from residence_council.config.election_config import ElectionConfig
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Builder, MaintenanceExpense


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from residence_council import __version__

    return __version__


@pytest.fixture
def builder_principal() -> Principal:
    return Principal("builder-principal")


@pytest.fixture
def builder(builder_principal: Principal) -> Builder:
    return Builder(
        identity=builder_principal,
        name="Oakline Construction",
        contact_info="office@oakline.example",
    )


@pytest.fixture
def expenses() -> list[MaintenanceExpense]:
    return [
        MaintenanceExpense(name="Cleaning", amount=120.0),
        MaintenanceExpense(name="Elevator service", amount=80.5),
    ]


@pytest.fixture
def owners() -> dict[int, Principal]:
    """Owner principal per apartment number 1..3."""
    return {number: Principal(f"owner-{number}") for number in (1, 2, 3)}


@pytest.fixture
def make_service(
    builder: Builder,
    expenses: list[MaintenanceExpense],
    owners: dict[int, Principal],
) -> Callable[..., ResidenceService]:
    """Factory for an initialized residence with apartments 1..3 registered."""

    def _make(
        config: ElectionConfig | None = None,
        apartments_count: int = 3,
    ) -> ResidenceService:
        service = create_residence_service(config=config or ElectionConfig())
        service.initialize_residence("Maple Court", apartments_count, builder, expenses)
        for number, owner in owners.items():
            service.add_apartment(number, f"Apt {number}", owner, builder.identity)
        return service

    return _make


@pytest.fixture
def service(make_service: Callable[..., ResidenceService]) -> ResidenceService:
    return make_service()
