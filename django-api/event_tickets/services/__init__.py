from event_tickets.services.ticket_service import TicketService

__all__ = ["TicketService"]
