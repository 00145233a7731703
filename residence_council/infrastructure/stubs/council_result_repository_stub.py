"""Council result repository stub implementation.

In-memory implementation of CouncilResultRepositoryProtocol, keeping
every finalized result by cycle.
"""

from __future__ import annotations

from residence_council.application.ports.council_result_repository import (
    CouncilResultRepositoryProtocol,
)
from residence_council.domain.models.council_result import CouncilResult

DEV_MODE_WATERMARK: str = "DEV_STUB:CouncilResultRepositoryStub:v1"


class CouncilResultRepositoryStub(CouncilResultRepositoryProtocol):
    """In-memory council result storage.

    Attributes:
        _results: Dictionary of cycle_id -> CouncilResult.
    """

    def __init__(self) -> None:
        """Initialize empty result storage."""
        self._results: dict[int, CouncilResult] = {}

    def save(self, result: CouncilResult) -> None:
        self._results[result.cycle_id] = result

    def get_latest(self) -> CouncilResult | None:
        if not self._results:
            return None
        return self._results[max(self._results)]

    def get_by_cycle(self, cycle_id: int) -> CouncilResult | None:
        return self._results.get(cycle_id)

    def list_all(self) -> list[CouncilResult]:
        return [self._results[cycle_id] for cycle_id in sorted(self._results)]

    def clear(self) -> None:
        """Clear all stored results (for testing)."""
        self._results.clear()
