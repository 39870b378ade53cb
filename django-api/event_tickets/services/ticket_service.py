"""Ticket catalog service - all query logic lives here.

Services:
- Depend only on interfaces (stores)
- Normalize pagination regardless of what the caller validated
- Run the count and page fetch concurrently
- Wrap store failures in QueryFailedError
- Return projected domain models
"""

import asyncio
import logging
from collections.abc import Sequence

from event_tickets.domain import TicketCriteria, TicketPage, TrendingTickets
from event_tickets.domain.errors import QueryFailedError
from event_tickets.domain.queries import (
    MOST_SOLD_FIRST,
    NEWEST_FIRST,
    SOONEST_FIRST,
    SortKey,
)
from event_tickets.services.projection import project_ticket
from event_tickets.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 8
MAX_LIMIT = 50
TRENDING_LIMIT = 5
# Largest OFFSET/LIMIT the SQL backends accept (signed 64-bit).
MAX_ROW_OFFSET = 2**63 - 1


def normalize_pagination(page: int, limit: int) -> tuple[int, int]:
    """Clamp page to >= 1 and limit to [1, MAX_LIMIT]."""
    return max(1, page), min(max(1, limit), MAX_LIMIT)


async def _no_tickets() -> list:
    return []


def _failure(action: str, exc: Exception) -> QueryFailedError:
    cause = str(exc) or "Unknown error"
    return QueryFailedError(f"Failed to fetch {action}: {cause}")


class TicketService:
    """Service for event ticket catalog queries."""

    def __init__(self, store: TicketStore) -> None:
        self._store = store

    async def list_tickets(self, page: int = 1, limit: int = DEFAULT_LIMIT) -> TicketPage:
        """Return a page of all tickets, newest first.

        Raises:
            QueryFailedError: If the store fails.
        """
        return await self._paginate(
            TicketCriteria(), NEWEST_FIRST, page, limit, action="event tickets"
        )

    async def list_tickets_by_category(
        self, category: str, page: int = 1, limit: int = DEFAULT_LIMIT
    ) -> TicketPage:
        """Return a page of tickets whose category equals ``category``
        ignoring case, soonest event first.

        Raises:
            QueryFailedError: If the store fails.
        """
        return await self._paginate(
            TicketCriteria(category=category),
            SOONEST_FIRST,
            page,
            limit,
            action="event tickets by category",
        )

    async def list_trending_tickets(self) -> TrendingTickets:
        """Return up to TRENDING_LIMIT tickets flagged trending or selling well.

        Raises:
            QueryFailedError: If the store fails.
        """
        try:
            tickets = await self._store.find(
                TicketCriteria(trending_only=True), MOST_SOLD_FIRST, limit=TRENDING_LIMIT
            )
        except Exception as exc:
            raise _failure("trending event tickets", exc) from exc
        return TrendingTickets(tickets=tuple(project_ticket(ticket) for ticket in tickets))

    async def _paginate(
        self,
        criteria: TicketCriteria,
        ordering: Sequence[SortKey],
        page: int,
        limit: int,
        action: str,
    ) -> TicketPage:
        page, limit = normalize_pagination(page, limit)
        skip = (page - 1) * limit
        if skip + limit > MAX_ROW_OFFSET:
            fetch = _no_tickets()
        else:
            fetch = self._store.find(criteria, ordering, skip=skip, limit=limit)
        logger.debug("Fetching %s: %s page=%d limit=%d", action, criteria, page, limit)
        try:
            tickets, total = await asyncio.gather(fetch, self._store.count(criteria))
        except Exception as exc:
            raise _failure(action, exc) from exc
        return TicketPage(
            page=page,
            limit=limit,
            total=total,
            tickets=tuple(project_ticket(ticket) for ticket in tickets),
        )
