"""
Domain layer - Pure governance logic for the residence council.

This layer contains:
- Value objects (apartments, roles, votes, principals)
- The election cycle state machine and application book
- Domain exceptions

This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from residence_council.domain.exceptions import ResidenceError

__all__: list[str] = ["ResidenceError"]
