"""Django ORM implementation of the TicketStore."""

from collections.abc import Sequence

from django.db.models import Q, QuerySet

from event_tickets import models
from event_tickets.domain import (
    EventStatus,
    EventTicket,
    Money,
    SortKey,
    TicketCount,
    TicketCriteria,
    TicketId,
)
from event_tickets.domain.queries import TRENDING_SOLD_THRESHOLD
from event_tickets.stores.interfaces import TicketStore


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using the Django async ORM."""

    async def find(
        self,
        criteria: TicketCriteria,
        ordering: Sequence[SortKey],
        skip: int = 0,
        limit: int | None = None,
    ) -> list[EventTicket]:
        queryset = self._filtered(criteria).order_by(*self._order_by(ordering))
        end = skip + limit if limit is not None else None
        return [self._to_domain(row) async for row in queryset[skip:end]]

    async def count(self, criteria: TicketCriteria) -> int:
        return await self._filtered(criteria).acount()

    def _filtered(self, criteria: TicketCriteria) -> QuerySet[models.EventTicket]:
        queryset = models.EventTicket.objects.all()
        if criteria.category is not None:
            queryset = queryset.filter(category_key=criteria.category.casefold())
        if criteria.trending_only:
            queryset = queryset.filter(
                Q(is_trending=True) | Q(sold_tickets__gt=TRENDING_SOLD_THRESHOLD)
            )
        return queryset

    @staticmethod
    def _order_by(ordering: Sequence[SortKey]) -> list[str]:
        return [
            f"-{key.field.value}" if key.descending else key.field.value
            for key in ordering
        ]

    @staticmethod
    def _to_domain(row: models.EventTicket) -> EventTicket:
        return EventTicket(
            id=TicketId(row.id),
            name=row.name,
            description=row.description,
            price=Money(row.price),
            privacy_level=row.privacy_level,
            category=row.category,
            organizer_id=row.organizer_id,
            event_date=row.event_date,
            location=row.location,
            ticket_types=tuple(row.ticket_types),
            total_tickets=TicketCount(row.total_tickets),
            available_tickets=TicketCount(row.available_tickets),
            sold_tickets=TicketCount(row.sold_tickets),
            event_status=EventStatus(row.event_status),
            image_url=row.image_url,
            tags=tuple(row.tags),
            is_trending=row.is_trending,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
