"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from uuid import UUID


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for an EventTicket."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation. Zero means a free event."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class TicketCount:
    """Non-negative number of tickets."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Ticket count cannot be negative")


class PrivacyLevel(IntEnum):
    """How identifiable a ticket holder is."""

    ANONYMOUS = 0
    WALLET_REQUIRED = 1
    VERIFIED_ACCESS = 2


class EventStatus(Enum):
    """Lifecycle state of the ticketed event."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
