from tickets.domain.models import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    PurchaseOrder,
    TicketCounts,
)
from tickets.domain.value_objects import AccountId, Money, TicketType, TicketTypeRequest

__all__ = [
    "PurchaseOrder",
    "TicketCounts",
    "MAX_TICKETS_PER_PURCHASE",
    "TICKET_PRICES",
    "AccountId",
    "Money",
    "TicketType",
    "TicketTypeRequest",
]
