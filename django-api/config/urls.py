from django.urls import include, path

urlpatterns = [
    path("api/event-tickets/", include("event_tickets.urls")),
]
