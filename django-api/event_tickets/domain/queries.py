"""Query objects describing what a store should fetch.

Stores translate these into their own query language; ``matches`` and
``sort_key`` give the reference semantics for in-process stores.
"""

from dataclasses import dataclass
from enum import Enum

from event_tickets.domain.models import EventTicket

TRENDING_SOLD_THRESHOLD = 100


@dataclass(frozen=True)
class TicketCriteria:
    """Filter over event tickets. The empty criteria matches everything."""

    category: str | None = None
    trending_only: bool = False

    def matches(self, ticket: EventTicket) -> bool:
        if self.category is not None and ticket.category.casefold() != self.category.casefold():
            return False
        if self.trending_only:
            return ticket.is_trending or ticket.sold_tickets.value > TRENDING_SOLD_THRESHOLD
        return True


class SortField(Enum):
    """Sortable ticket fields."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    EVENT_DATE = "event_date"
    SOLD_TICKETS = "sold_tickets"


@dataclass(frozen=True)
class SortKey:
    field: SortField
    descending: bool = False

    def value_of(self, ticket: EventTicket):
        value = getattr(ticket, self.field.value)
        return getattr(value, "value", value)


NEWEST_FIRST = (SortKey(SortField.CREATED_AT, descending=True),)
SOONEST_FIRST = (SortKey(SortField.EVENT_DATE),)
MOST_SOLD_FIRST = (
    SortKey(SortField.SOLD_TICKETS, descending=True),
    SortKey(SortField.UPDATED_AT, descending=True),
)
