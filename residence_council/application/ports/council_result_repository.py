"""Council result repository protocol.

Storage interface for finalized council results, one per cycle.
"""

from __future__ import annotations

from typing import Protocol

from residence_council.domain.models.council_result import CouncilResult


class CouncilResultRepositoryProtocol(Protocol):
    """Protocol for storing finalized council results."""

    def save(self, result: CouncilResult) -> None:
        """Store a finalized result, replacing any result for the same cycle."""
        ...

    def get_latest(self) -> CouncilResult | None:
        """Return the result with the highest cycle id, or None."""
        ...

    def get_by_cycle(self, cycle_id: int) -> CouncilResult | None:
        """Return the result of a specific cycle, or None."""
        ...

    def list_all(self) -> list[CouncilResult]:
        """Return every stored result, oldest cycle first."""
        ...
