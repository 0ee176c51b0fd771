"""Tests for the purchase_tickets management command.

Run with: pytest tests/test_commands.py -v
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


@pytest.fixture(autouse=True)
def use_recording_service(monkeypatch, ticket_service):
    monkeypatch.setattr(
        "tickets.management.commands.purchase_tickets.get_ticket_service",
        lambda: ticket_service,
    )


def run(*args: str) -> tuple[str, str]:
    stdout, stderr = StringIO(), StringIO()
    call_command("purchase_tickets", *args, stdout=stdout, stderr=stderr)
    return stdout.getvalue(), stderr.getvalue()


class TestPurchaseTicketsCommand:
    """Tests for python manage.py purchase_tickets"""

    def test_purchase_succeeds(self, gateway_calls):
        stdout, stderr = run("1", "ADULT=2", "CHILD=1", "infant=1")

        assert "Purchased 4 tickets for account 1" in stdout
        assert stderr == ""
        assert gateway_calls == [("make_payment", 1, 65), ("reserve_seat", 1, 3)]

    def test_rejected_purchase_reports_error(self, gateway_calls):
        """A rejected purchase is reported on stderr and the command exits normally."""
        stdout, stderr = run("1", "INFANT=1")

        assert "Purchase failed: Child and Infant tickets require an Adult ticket" in stderr
        assert stdout == ""
        assert gateway_calls == []

    def test_no_tickets_reports_error(self):
        _, stderr = run("1")

        assert "Purchase failed: No tickets requested" in stderr

    @pytest.mark.parametrize("ticket", ["ADULT", "SENIOR=1", "ADULT=0", "ADULT=two"])
    def test_malformed_ticket_argument_raises_command_error(self, ticket):
        with pytest.raises(CommandError):
            run("1", ticket)
