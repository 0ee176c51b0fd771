"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.services import TicketService


class RecordingPaymentGateway(PaymentGateway):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))


class RecordingSeatReservationGateway(SeatReservationGateway):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls() -> list:
    """Calls made to either gateway, in order."""
    return []


@pytest.fixture
def payment_gateway(gateway_calls: list) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def reservation_gateway(gateway_calls: list) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def ticket_service(payment_gateway, reservation_gateway) -> TicketService:
    return TicketService(payment_gateway, reservation_gateway)
