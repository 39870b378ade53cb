from event_tickets.domain.models import EventTicket, TicketPage, TicketSummary, TrendingTickets
from event_tickets.domain.queries import SortKey, TicketCriteria
from event_tickets.domain.value_objects import EventStatus, Money, PrivacyLevel, TicketCount, TicketId

__all__ = [
    "EventTicket",
    "TicketSummary",
    "TicketPage",
    "TrendingTickets",
    "TicketCriteria",
    "SortKey",
    "TicketId",
    "Money",
    "TicketCount",
    "PrivacyLevel",
    "EventStatus",
]
