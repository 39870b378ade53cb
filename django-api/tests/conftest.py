"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from event_tickets.domain import EventStatus, EventTicket, Money, TicketCount, TicketId

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def organizer(django_user_model):
    return django_user_model.objects.create_user(username="organizer", password="x")


@pytest.fixture
def make_ticket(organizer):
    """Create a persisted ticket; ``created_at`` may be overridden."""
    from event_tickets.models import EventTicket as EventTicketModel

    def _make(created_at: datetime | None = None, **overrides) -> EventTicketModel:
        sold = overrides.pop("sold_tickets", 0)
        total = overrides.pop("total_tickets", max(200, sold))
        fields = {
            "name": "Web3 Meetup",
            "description": "An evening of talks",
            "price": Decimal("25.00"),
            "privacy_level": 1,
            "category": "Web3",
            "organizer": organizer,
            "event_date": BASE_TIME + timedelta(days=30),
            "ticket_types": ["paid"],
            "total_tickets": total,
            "available_tickets": total - sold,
            "sold_tickets": sold,
            "image_url": "https://example.com/image.png",
        }
        fields.update(overrides)
        ticket = EventTicketModel.objects.create(**fields)
        if created_at is not None:
            EventTicketModel.objects.filter(pk=ticket.pk).update(created_at=created_at)
            ticket.refresh_from_db()
        return ticket

    return _make


def _build_ticket(**overrides) -> EventTicket:
    fields = {
        "id": TicketId(uuid4()),
        "name": "Web3 Meetup",
        "description": "An evening of talks",
        "price": Money(Decimal("25.00")),
        "privacy_level": 1,
        "category": "Web3",
        "organizer_id": 1,
        "event_date": BASE_TIME + timedelta(days=30),
        "location": "Virtual",
        "ticket_types": ("paid",),
        "total_tickets": TicketCount(200),
        "available_tickets": TicketCount(200),
        "sold_tickets": TicketCount(0),
        "event_status": EventStatus.UPCOMING,
        "image_url": "https://example.com/image.png",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    fields.update(overrides)
    return EventTicket(**fields)


@pytest.fixture
def build_ticket():
    """Build domain EventTickets without touching the database."""
    return _build_ticket
