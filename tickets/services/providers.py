"""Build services from Django settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.ticket_service import TicketService


def get_ticket_service() -> TicketService:
    """Return a TicketService wired with the gateways named in settings.TICKETS."""
    config = settings.TICKETS
    payment_gateway = import_string(config["PAYMENT_GATEWAY"])()
    reservation_gateway = import_string(config["SEAT_RESERVATION_GATEWAY"])()
    return TicketService(payment_gateway, reservation_gateway)
