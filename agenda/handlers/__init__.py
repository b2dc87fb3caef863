from agenda.handlers.views import (
    EventDetailView,
    EventListView,
    EventOccurrenceListView,
    EventPreviewView,
    OccurrencesByDateView,
)

__all__ = [
    "EventListView",
    "EventPreviewView",
    "EventDetailView",
    "EventOccurrenceListView",
    "OccurrencesByDateView",
]
