"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from event_tickets.domain import EventTicket, SortKey, TicketCriteria


class TicketStore(ABC):
    """Interface for event ticket persistence operations."""

    @abstractmethod
    async def find(
        self,
        criteria: TicketCriteria,
        ordering: Sequence[SortKey],
        skip: int = 0,
        limit: int | None = None,
    ) -> list[EventTicket]:
        """Return tickets matching criteria, sorted by ordering, then sliced."""
        ...

    @abstractmethod
    async def count(self, criteria: TicketCriteria) -> int:
        """Return the number of tickets matching criteria."""
        ...
