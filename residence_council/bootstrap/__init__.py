"""Bootstrap wiring for the residence council."""
