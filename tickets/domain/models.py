"""Domain models for a ticket purchase.

These are transient: nothing here is persisted.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Self

from tickets.domain.value_objects import AccountId, Money, TicketType, TicketTypeRequest

MAX_TICKETS_PER_PURCHASE = 25

TICKET_PRICES: Mapping[TicketType, Money] = MappingProxyType(
    {
        TicketType.INFANT: Money(0),
        TicketType.CHILD: Money(15),
        TicketType.ADULT: Money(25),
    }
)


@dataclass(frozen=True)
class TicketCounts:
    """Ticket quantities summed per ticket type."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals: Counter[TicketType] = Counter()
        for request in requests:
            totals[request.ticket_type] += request.quantity
        return cls(
            adult=totals[TicketType.ADULT],
            child=totals[TicketType.CHILD],
            infant=totals[TicketType.INFANT],
        )

    def count(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adult
            case TicketType.CHILD:
                return self.child
            case TicketType.INFANT:
                return self.infant
        raise ValueError(f"Unknown ticket type: {ticket_type!r}")

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def seats(self) -> int:
        # Infants sit on an adult's lap.
        return self.adult + self.child


@dataclass(frozen=True)
class PurchaseOrder:
    """A validated purchase, ready for payment and seat reservation."""

    account_id: AccountId
    counts: TicketCounts
    total_amount: Money
    total_seats: int

    @classmethod
    def price(cls, account_id: AccountId, counts: TicketCounts) -> Self:
        total_amount = sum(
            (TICKET_PRICES[ticket_type] * counts.count(ticket_type) for ticket_type in TicketType),
            Money(0),
        )
        return cls(
            account_id=account_id,
            counts=counts,
            total_amount=total_amount,
            total_seats=counts.seats,
        )
