"""Purchase tickets from the command line.

Usage: python manage.py purchase_tickets 1 ADULT=2 CHILD=1 INFANT=1
"""

import argparse

from django.core.management.base import BaseCommand

from tickets.domain import TicketType, TicketTypeRequest
from tickets.domain.errors import InvalidPurchaseError
from tickets.services import get_ticket_service


def parse_ticket_request(value: str) -> TicketTypeRequest:
    """Parse a TYPE=QUANTITY argument such as ``ADULT=2``."""
    name, sep, quantity = value.partition("=")
    try:
        if not sep:
            raise ValueError
        return TicketTypeRequest(TicketType(name.strip().upper()), int(quantity))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid ticket request {value!r}, expected TYPE=QUANTITY"
        ) from None


class Command(BaseCommand):
    help = "Purchase tickets for an account and reserve their seats."

    def add_arguments(self, parser):
        parser.add_argument("account_id", type=int)
        parser.add_argument("tickets", nargs="*", type=parse_ticket_request, metavar="TYPE=QUANTITY")

    def handle(self, *args, **options):
        account_id = options["account_id"]
        requests = options["tickets"]
        try:
            get_ticket_service().purchase_tickets(account_id, *requests)
        except InvalidPurchaseError as exc:
            self.stderr.write(f"Purchase failed: {exc.message}")
            return

        total = sum(request.quantity for request in requests)
        self.stdout.write(self.style.SUCCESS(f"Purchased {total} tickets for account {account_id}"))
