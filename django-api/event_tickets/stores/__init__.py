from event_tickets.stores.interfaces import TicketStore
from event_tickets.stores.memory_store import InMemoryTicketStore

__all__ = ["TicketStore", "InMemoryTicketStore"]
