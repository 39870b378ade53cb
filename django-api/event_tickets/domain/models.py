"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in event_tickets/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime

from event_tickets.domain.value_objects import EventStatus, Money, TicketCount, TicketId


@dataclass(frozen=True)
class EventTicket:
    """Domain representation of an EventTicket.

    ``privacy_level`` is kept as the raw stored integer; the store constrains
    it to 0/1/2 on write and the projection tolerates anything else.
    """

    id: TicketId
    name: str
    description: str
    price: Money
    privacy_level: int
    category: str
    organizer_id: int
    event_date: datetime
    location: str
    ticket_types: tuple[str, ...]
    total_tickets: TicketCount
    available_tickets: TicketCount
    sold_tickets: TicketCount
    event_status: EventStatus
    image_url: str
    created_at: datetime
    updated_at: datetime
    tags: tuple[str, ...] = ()
    is_trending: bool = False

    def __post_init__(self) -> None:
        if not self.ticket_types:
            raise ValueError("An event ticket needs at least one ticket type")


@dataclass(frozen=True)
class TicketSummary:
    """Read-facing projection of an EventTicket. Never persisted."""

    title: str
    status: str
    participants_count: int
    anonymity_percentage: str
    date: str
    time: str
    timezone: str
    location: str
    price: Money
    image_url: str


@dataclass(frozen=True)
class TicketPage:
    """One page of projected tickets plus pagination metadata."""

    page: int
    limit: int
    total: int
    tickets: tuple[TicketSummary, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TrendingTickets:
    """Trending projection; ``count`` is the number of tickets returned."""

    tickets: tuple[TicketSummary, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.tickets)
