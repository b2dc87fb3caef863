from django.urls import path

from agenda.handlers import (
    EventDetailView,
    EventListView,
    EventOccurrenceListView,
    EventPreviewView,
    OccurrencesByDateView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/preview", EventPreviewView.as_view(), name="event-preview"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/occurrences",
        EventOccurrenceListView.as_view(),
        name="event-occurrences",
    ),
    path("occurrences", OccurrencesByDateView.as_view(), name="occurrences-by-date"),
]
