from django.urls import path

from event_tickets.handlers import (
    TicketCategoryListView,
    TicketListView,
    TrendingTicketListView,
)

urlpatterns = [
    path("", TicketListView.as_view(), name="ticket-list"),
    path("trending", TrendingTicketListView.as_view(), name="ticket-trending"),
    path("category/", TicketCategoryListView.as_view(), name="ticket-category-blank"),
    path(
        "category/<str:category>",
        TicketCategoryListView.as_view(),
        name="ticket-category",
    ),
]
