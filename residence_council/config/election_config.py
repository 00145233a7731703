"""Council election configuration.

This module defines the tunable election rules with environment variable
overrides for deployment.

Environment Variables:
- COUNCIL_ALLOW_SELF_VOTE: Whether an apartment may vote for itself (default: true)
- COUNCIL_TIE_BREAK_POLICY: How tied tallies are resolved,
  "lowest_apartment_number" or "reject" (default: lowest_apartment_number)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from residence_council.domain.models.council_result import TieBreakPolicy

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognized.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_policy_env(key: str, default: TieBreakPolicy) -> TieBreakPolicy:
    """Get tie-break policy environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return TieBreakPolicy(value.strip().lower())
    except ValueError:
        return default


@dataclass(frozen=True)
class ElectionConfig:
    """Rules applied by the council election.

    Attributes:
        allow_self_vote: Whether an apartment may vote for itself.
            Default: True.
        tie_break_policy: How a tally picks among apartments sharing the
            highest count. Default: lowest apartment number.
    """

    allow_self_vote: bool = True
    tie_break_policy: TieBreakPolicy = TieBreakPolicy.LOWEST_APARTMENT_NUMBER

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.allow_self_vote, bool):
            raise ValueError(
                f"allow_self_vote must be a bool, got {self.allow_self_vote!r}"
            )
        if not isinstance(self.tie_break_policy, TieBreakPolicy):
            raise ValueError(
                f"tie_break_policy must be a TieBreakPolicy, got {self.tie_break_policy!r}"
            )

    @classmethod
    def from_environment(cls) -> "ElectionConfig":
        """Create config from environment variables with defaults.

        Environment Variables:
            COUNCIL_ALLOW_SELF_VOTE: Allow self-votes (default: true)
            COUNCIL_TIE_BREAK_POLICY: Tie-break policy (default: lowest_apartment_number)

        Returns:
            ElectionConfig with values from environment or defaults.
        """
        return cls(
            allow_self_vote=_get_bool_env("COUNCIL_ALLOW_SELF_VOTE", True),
            tie_break_policy=_get_policy_env(
                "COUNCIL_TIE_BREAK_POLICY", TieBreakPolicy.LOWEST_APARTMENT_NUMBER
            ),
        )


# Pre-defined configurations for common use cases

# Permissive defaults
DEFAULT_ELECTION_CONFIG = ElectionConfig()

# No self-votes, ties go back to the residents
STRICT_ELECTION_CONFIG = ElectionConfig(
    allow_self_vote=False,
    tie_break_policy=TieBreakPolicy.REJECT,
)
