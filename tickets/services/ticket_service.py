"""Ticket service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Raise domain errors for rejected purchases
- Let gateway errors propagate untouched
"""

import logging

from tickets.domain import (
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
    PurchaseOrder,
    TicketCounts,
    TicketTypeRequest,
)
from tickets.domain.errors import (
    AdultTicketRequiredError,
    InvalidAccountIdError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    TicketLimitExceededError,
    TooManyInfantsError,
)
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating, pricing and booking ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._reservation_gateway = reservation_gateway

    def purchase_tickets(self, account_id: object = None, *ticket_type_requests: object) -> None:
        """Take payment for and reserve seats for the requested tickets.

        Payment is taken before seats are reserved. Neither gateway is
        called if the purchase is rejected.

        Raises:
            InvalidAccountIdError: If account_id is not a positive integer.
            InvalidTicketRequestError: If no tickets are requested or a
                request is not a TicketTypeRequest.
            TicketLimitExceededError: If more than MAX_TICKETS_PER_PURCHASE
                tickets are requested in total.
            AdultTicketRequiredError: If child or infant tickets are requested
                without an adult ticket.
            TooManyInfantsError: If there are more infant than adult tickets.
        """
        try:
            order = self._build_order(account_id, ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.info("Purchase rejected for account %r: %s", account_id, exc.code.value)
            raise

        logger.info(
            "Purchasing %s tickets for account %s: amount=%s seats=%s",
            order.counts.total,
            order.account_id.value,
            order.total_amount,
            order.total_seats,
        )
        self._payment_gateway.make_payment(order.account_id.value, order.total_amount.amount)
        try:
            self._reservation_gateway.reserve_seat(order.account_id.value, order.total_seats)
        except Exception:
            logger.exception(
                "Payment of %s taken for account %s but seat reservation failed",
                order.total_amount,
                order.account_id.value,
            )
            raise

    def _build_order(self, account_id: object, requests: tuple[object, ...]) -> PurchaseOrder:
        account = self._parse_account_id(account_id)
        self._validate_ticket_requests(requests)
        counts = TicketCounts.from_requests(requests)  # type: ignore[arg-type]
        self._validate_business_rules(counts)
        return PurchaseOrder.price(account, counts)

    @staticmethod
    def _parse_account_id(account_id: object) -> AccountId:
        try:
            return AccountId.from_value(account_id)
        except ValueError:
            raise InvalidAccountIdError() from None

    @staticmethod
    def _validate_ticket_requests(requests: tuple[object, ...]) -> None:
        if not requests:
            raise InvalidTicketRequestError("No tickets requested")
        if not all(isinstance(request, TicketTypeRequest) for request in requests):
            raise InvalidTicketRequestError("Invalid ticket request format")

    @staticmethod
    def _validate_business_rules(counts: TicketCounts) -> None:
        if counts.total > MAX_TICKETS_PER_PURCHASE:
            raise TicketLimitExceededError(MAX_TICKETS_PER_PURCHASE)
        if counts.adult == 0 and (counts.child > 0 or counts.infant > 0):
            raise AdultTicketRequiredError()
        if counts.infant > counts.adult:
            raise TooManyInfantsError()
