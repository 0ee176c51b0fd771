"""Gateway interfaces for the external payment and seat booking services.

Gateways must be swappable. They are trusted: a gateway signals failure
by raising, and callers let that error propagate.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
