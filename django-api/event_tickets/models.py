"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


def default_ticket_types() -> list[str]:
    return ["free"]


class EventTicket(models.Model):
    """Persistence model for event tickets."""

    class Privacy(models.IntegerChoices):
        ANONYMOUS = 0, "Anonymous"
        WALLET_REQUIRED = 1, "Wallet-Required"
        VERIFIED_ACCESS = 2, "Verified Access"

    class Status(models.TextChoices):
        UPCOMING = "upcoming", "Upcoming"
        ONGOING = "ongoing", "Ongoing"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    privacy_level = models.PositiveSmallIntegerField(
        choices=Privacy.choices, default=Privacy.WALLET_REQUIRED
    )
    category = models.CharField(max_length=100)
    # Casefolded copy of category; SQL LOWER/LIKE only fold ASCII on SQLite.
    category_key = models.CharField(max_length=300, editable=False, default="")
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_tickets",
    )
    event_date = models.DateTimeField()
    location = models.CharField(max_length=255, default="Virtual")
    ticket_types = models.JSONField(default=default_ticket_types)
    total_tickets = models.PositiveIntegerField()
    available_tickets = models.PositiveIntegerField()
    sold_tickets = models.PositiveIntegerField(default=0)
    event_status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.UPCOMING
    )
    image_url = models.URLField(max_length=500)
    tags = models.JSONField(default=list, blank=True)
    is_trending = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="ticket_created_desc_idx"),
            models.Index(fields=["event_date"], name="ticket_event_date_idx"),
            models.Index(fields=["category_key"], name="ticket_category_key_idx"),
            models.Index(
                fields=["-sold_tickets", "-updated_at"], name="ticket_trending_idx"
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0), name="event_ticket_price_non_negative"
            ),
            models.CheckConstraint(
                condition=models.Q(privacy_level__in=[0, 1, 2]),
                name="event_ticket_privacy_level_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(
                    sold_tickets__lte=models.F("total_tickets")
                    - models.F("available_tickets")
                ),
                name="event_ticket_counts_within_total",
            ),
        ]

    def save(self, *args, **kwargs):
        self.category_key = self.category.casefold()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "category" in update_fields:
            kwargs["update_fields"] = {*update_fields, "category_key"}
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
