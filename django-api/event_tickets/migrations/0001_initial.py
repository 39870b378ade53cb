import uuid

import django.core.validators
import django.db.models.deletion
import event_tickets.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="EventTicket",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "privacy_level",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (0, "Anonymous"),
                            (1, "Wallet-Required"),
                            (2, "Verified Access"),
                        ],
                        default=1,
                    ),
                ),
                ("category", models.CharField(max_length=100)),
                ("event_date", models.DateTimeField()),
                ("location", models.CharField(default="Virtual", max_length=255)),
                (
                    "ticket_types",
                    models.JSONField(default=event_tickets.models.default_ticket_types),
                ),
                ("total_tickets", models.PositiveIntegerField()),
                ("available_tickets", models.PositiveIntegerField()),
                ("sold_tickets", models.PositiveIntegerField(default=0)),
                (
                    "event_status",
                    models.CharField(
                        choices=[
                            ("upcoming", "Upcoming"),
                            ("ongoing", "Ongoing"),
                            ("completed", "Completed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="upcoming",
                        max_length=20,
                    ),
                ),
                ("image_url", models.URLField(max_length=500)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("is_trending", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "organizer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="event_tickets",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="ticket_created_desc_idx"),
                    models.Index(fields=["event_date"], name="ticket_event_date_idx"),
                    models.Index(
                        fields=["-sold_tickets", "-updated_at"],
                        name="ticket_trending_idx",
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("price__gte", 0)),
                        name="event_ticket_price_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("privacy_level__in", [0, 1, 2])),
                        name="event_ticket_privacy_level_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            (
                                "sold_tickets__lte",
                                models.F("total_tickets") - models.F("available_tickets"),
                            )
                        ),
                        name="event_ticket_counts_within_total",
                    ),
                ],
            },
        ),
    ]
