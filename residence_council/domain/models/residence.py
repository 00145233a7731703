"""Residence setup domain models.

This module defines the building-level records created once when a
residence is set up: the builder, the residence itself with its
maintenance expense list, and the apartments registered by the builder.

All models are frozen dataclasses. Apartments never change after
registration; ownership transfer is outside the residence's call surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from residence_council.domain.models.principal import Principal


@dataclass(frozen=True, eq=True)
class Builder:
    """The party that constructed the residence and registers apartments.

    Attributes:
        identity: Principal allowed to add apartments.
        name: Display name of the builder.
        contact_info: Free-form contact details.
    """

    identity: Principal
    name: str = field(default="")
    contact_info: str = field(default="")


@dataclass(frozen=True, eq=True)
class MaintenanceExpense:
    """A recurring maintenance expense shared by the residence.

    Attributes:
        name: Expense label (e.g. "Elevator service").
        amount: Expense amount, never negative.
    """

    name: str
    amount: float

    def __post_init__(self) -> None:
        """Validate expense fields."""
        if not self.name:
            raise ValueError("Maintenance expense name cannot be empty")
        if self.amount < 0:
            raise ValueError(
                f"Maintenance expense amount must be non-negative, got {self.amount}"
            )


@dataclass(frozen=True, eq=True)
class Residence:
    """The residence governed by the council.

    Attributes:
        name: Residence name.
        apartments_count: Maximum number of apartments the builder may register.
        maintenance_expenses: Shared maintenance expenses.
    """

    name: str
    apartments_count: int
    maintenance_expenses: tuple[MaintenanceExpense, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate residence fields."""
        if not self.name:
            raise ValueError("Residence name cannot be empty")
        if self.apartments_count < 1:
            raise ValueError(
                f"Apartments count must be greater than zero, got {self.apartments_count}"
            )
        if not self.maintenance_expenses:
            raise ValueError("Maintenance expenses cannot be empty")

    @property
    def total_maintenance(self) -> float:
        """Sum of all maintenance expense amounts."""
        return sum(expense.amount for expense in self.maintenance_expenses)


@dataclass(frozen=True, eq=True)
class Apartment:
    """A registered apartment.

    Attributes:
        number: Unique positive apartment number.
        name: Apartment label.
        owner: Principal owning the apartment; the only identity allowed
            to apply or vote on its behalf.
    """

    number: int
    name: str
    owner: Principal

    def __post_init__(self) -> None:
        """Validate apartment fields."""
        if self.number < 1:
            raise ValueError(f"Apartment number must be positive, got {self.number}")
        if not self.name:
            raise ValueError("Apartment name cannot be empty")

    def is_owned_by(self, identity: Principal) -> bool:
        return self.owner == identity
