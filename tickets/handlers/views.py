"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import DomainError, InvalidPurchaseError
from tickets.handlers.serializers import PurchaseSerializer
from tickets.services import get_ticket_service


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    "code": "INVALID_REQUEST",
                    "message": "Malformed purchase request",
                    "errors": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        account_id = serializer.validated_data["account_id"]
        requests = serializer.ticket_type_requests()
        try:
            get_ticket_service().purchase_tickets(account_id, *requests)
        except InvalidPurchaseError as exc:
            return error_response(exc)

        return Response(
            {
                "account_id": account_id,
                "tickets": [
                    {"type": r.ticket_type.value, "quantity": r.quantity} for r in requests
                ],
            },
            status=status.HTTP_201_CREATED,
        )
