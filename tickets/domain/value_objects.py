"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketType(Enum):
    """Ticket classes that can be purchased."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AccountId:
    """Identifier of the account making a purchase."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value <= 0:
            raise ValueError("Account ID must be a positive integer")

    @classmethod
    def from_value(cls, value: object) -> Self:
        """Build from any number with no fractional part, e.g. ``7`` or ``7.0``."""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return cls(value=value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Money:
    """Whole-unit price with validation."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of a single type.

    Requests for the same type are not merged here; see TicketCounts.
    """

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        if not _is_int(self.quantity) or self.quantity <= 0:
            raise ValueError("Ticket quantity must be a positive integer")
