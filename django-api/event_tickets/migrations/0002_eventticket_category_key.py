from django.db import migrations, models


def fill_category_key(apps, schema_editor):
    EventTicket = apps.get_model("event_tickets", "EventTicket")
    for ticket in EventTicket.objects.only("pk", "category").iterator():
        EventTicket.objects.filter(pk=ticket.pk).update(
            category_key=ticket.category.casefold()
        )


class Migration(migrations.Migration):

    dependencies = [
        ("event_tickets", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="eventticket",
            name="category_key",
            field=models.CharField(default="", editable=False, max_length=300),
        ),
        migrations.RunPython(fill_category_key, migrations.RunPython.noop),
        migrations.AddIndex(
            model_name="eventticket",
            index=models.Index(fields=["category_key"], name="ticket_category_key_idx"),
        ),
    ]
