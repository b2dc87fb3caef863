"""Django signals for cache invalidation.

Invalidation runs on commit so readers never re-cache a half-written event.
"""

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from agenda.cache import EVENT_LIST_KEY, event_key, event_occurrences_key, occurrences_on_key
from agenda.models import Event, Occurrence


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    event_id = instance.pk

    def invalidate():
        days = Occurrence.objects.filter(event_id=event_id).values_list("date", flat=True)
        cache.delete_many(
            [
                EVENT_LIST_KEY,
                event_key(event_id),
                event_occurrences_key(event_id),
                *(occurrences_on_key(day) for day in set(days)),
            ]
        )

    transaction.on_commit(invalidate)


@receiver([post_save, post_delete], sender=Occurrence)
def invalidate_occurrence_cache(sender, instance, **kwargs):
    """Invalidate caches when an occurrence is saved or deleted."""
    keys = [occurrences_on_key(instance.date), event_occurrences_key(instance.event_id)]
    transaction.on_commit(lambda: cache.delete_many(keys))
