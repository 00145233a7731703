"""Caller identity value object.

The hosting platform authenticates every call and hands the service an
opaque principal. The domain only ever compares principals for equality.
"""

from __future__ import annotations

from dataclasses import dataclass

ANONYMOUS_PRINCIPAL_TEXT = "2vxsx-fae"


@dataclass(frozen=True, eq=True, order=True)
class Principal:
    """Opaque caller identifier used for authorization checks.

    Attributes:
        text: Textual form of the identity as delivered by the host.
    """

    text: str

    def __post_init__(self) -> None:
        """Validate principal text."""
        if not self.text or not self.text.strip():
            raise ValueError("Principal text cannot be empty")

    @classmethod
    def anonymous(cls) -> Principal:
        """Return the host's anonymous principal."""
        return cls(ANONYMOUS_PRINCIPAL_TEXT)

    @property
    def is_anonymous(self) -> bool:
        return self.text == ANONYMOUS_PRINCIPAL_TEXT

    def __str__(self) -> str:
        return self.text
