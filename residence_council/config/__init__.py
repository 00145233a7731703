"""Configuration module for the residence council.

Available Configurations:
- ElectionConfig: Self-vote permission and tie-break policy
"""

from residence_council.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    STRICT_ELECTION_CONFIG,
    ElectionConfig,
)

__all__ = [
    "ElectionConfig",
    "DEFAULT_ELECTION_CONFIG",
    "STRICT_ELECTION_CONFIG",
]
