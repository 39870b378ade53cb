"""Mapping from stored tickets to the read-facing TicketSummary.

Dates and times are rendered in the serving process's active time zone
(``settings.TIME_ZONE`` unless overridden), not in any per-event zone.
"""

from datetime import datetime

from django.utils import dateformat, timezone

from event_tickets.domain import EventTicket, PrivacyLevel, TicketSummary

PRIVACY_STATUS = {
    PrivacyLevel.ANONYMOUS: "Anonymous",
    PrivacyLevel.WALLET_REQUIRED: "Wallet-Required",
    PrivacyLevel.VERIFIED_ACCESS: "Verified Access",
}
UNKNOWN_STATUS = "Unknown"

# Placeholder until anonymity is computed from holder data.
ANONYMITY_PERCENTAGE = "60%"


def privacy_status(privacy_level: int) -> str:
    return PRIVACY_STATUS.get(privacy_level, UNKNOWN_STATUS)


def format_date(value: datetime) -> str:
    """Format as ``Jan 05, 2025``."""
    return dateformat.format(timezone.localtime(value), "M d, Y")


def format_time(value: datetime) -> str:
    """Format as ``3 PM``. Minutes are never shown."""
    return dateformat.format(timezone.localtime(value), "g A")


def format_utc_offset(value: datetime) -> str:
    """Format the local UTC offset at ``value`` as ``(UTC +05:30)``."""
    offset = timezone.localtime(value).utcoffset()
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"(UTC {sign}{hours:02d}:{minutes:02d})"


def project_ticket(ticket: EventTicket) -> TicketSummary:
    return TicketSummary(
        title=ticket.name,
        status=privacy_status(ticket.privacy_level),
        participants_count=ticket.sold_tickets.value,
        anonymity_percentage=ANONYMITY_PERCENTAGE,
        date=format_date(ticket.event_date),
        time=format_time(ticket.event_date),
        timezone=format_utc_offset(ticket.event_date),
        location=ticket.location,
        price=ticket.price,
        image_url=ticket.image_url,
    )
