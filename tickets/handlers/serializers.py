"""Serializers for parsing purchase requests.

Format checks only. Purchase rules are left to TicketService.
"""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for a single TicketTypeRequest."""

    type = serializers.ChoiceField(choices=[ticket_type.value for ticket_type in TicketType])
    quantity = serializers.IntegerField(min_value=1)

    def to_ticket_type_request(self, data: dict) -> TicketTypeRequest:
        return TicketTypeRequest(TicketType(data["type"]), data["quantity"])


class PurchaseSerializer(serializers.Serializer):
    """Serializer for a purchase request body."""

    account_id = serializers.IntegerField()
    tickets = TicketTypeRequestSerializer(many=True, allow_empty=True)

    def ticket_type_requests(self) -> list[TicketTypeRequest]:
        child = self.fields["tickets"].child
        return [child.to_ticket_type_request(item) for item in self.validated_data["tickets"]]
