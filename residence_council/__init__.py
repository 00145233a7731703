"""
Residence Council - Cooperative Governance for Residential Buildings

Apartment registration, council-role applications and a one-round,
multi-role council election with deterministic tallying.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
