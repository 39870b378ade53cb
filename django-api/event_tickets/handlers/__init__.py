from event_tickets.handlers.views import (
    TicketCategoryListView,
    TicketListView,
    TrendingTicketListView,
)

__all__ = ["TicketListView", "TicketCategoryListView", "TrendingTicketListView"]
