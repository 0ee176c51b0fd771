"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a purchase rule."""


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid account ID",
        )


class InvalidTicketRequestError(InvalidPurchaseError):
    """Raised when no tickets are requested or a request is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_REQUEST, message=message)


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when a purchase holds more tickets than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=(
                f"The maximum number of tickets per purchase allowed is {limit}, "
                "and this limit has been exceeded"
            ),
        )
        self.limit = limit


class AdultTicketRequiredError(InvalidPurchaseError):
    """Raised when child or infant tickets are bought without an adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="Child and Infant tickets require an Adult ticket",
        )


class TooManyInfantsError(InvalidPurchaseError):
    """Raised when there are more infants than adult laps."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message="Each infant requires an adult lap",
        )
