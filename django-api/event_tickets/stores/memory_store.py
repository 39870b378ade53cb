"""In-process TicketStore backed by a list. Useful for tests and local wiring."""

from collections.abc import Iterable, Sequence

from event_tickets.domain import EventTicket, SortKey, TicketCriteria
from event_tickets.stores.interfaces import TicketStore


class InMemoryTicketStore(TicketStore):
    """Holds domain tickets in memory and applies query semantics in Python."""

    def __init__(self, tickets: Iterable[EventTicket] = ()) -> None:
        self._tickets = list(tickets)

    def add(self, ticket: EventTicket) -> None:
        self._tickets.append(ticket)

    async def find(
        self,
        criteria: TicketCriteria,
        ordering: Sequence[SortKey],
        skip: int = 0,
        limit: int | None = None,
    ) -> list[EventTicket]:
        matched = [ticket for ticket in self._tickets if criteria.matches(ticket)]
        # Stable sorts applied from the least significant key.
        for key in reversed(ordering):
            matched.sort(key=key.value_of, reverse=key.descending)
        end = skip + limit if limit is not None else None
        return matched[skip:end]

    async def count(self, criteria: TicketCriteria) -> int:
        return sum(1 for ticket in self._tickets if criteria.matches(ticket))
