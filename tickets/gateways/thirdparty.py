"""Stand-ins for the third-party payment and seat booking providers.

Both only check argument types and log the call. They are the default
gateways in settings.TICKETS.
"""

import logging

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")


class TicketPaymentService(PaymentGateway):
    """Payment provider client."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _require_int("account_id", account_id)
        _require_int("total_amount_to_pay", total_amount_to_pay)
        logger.info("Payment of %s taken from account %s", total_amount_to_pay, account_id)


class SeatReservationService(SeatReservationGateway):
    """Seat booking provider client."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _require_int("account_id", account_id)
        _require_int("total_seats_to_allocate", total_seats_to_allocate)
        logger.info("%s seats reserved for account %s", total_seats_to_allocate, account_id)
