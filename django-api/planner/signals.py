"""Django signals for cache invalidation.

The resolved configuration of a venue is cached under
``venues:<code>:config``; any change to the rows it is built from drops
that key.
"""

import logging

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from planner.cache_keys import venue_config_key
from planner.models import Category, Location, Priority, Venue, VenueConfiguration

logger = logging.getLogger(__name__)


def _invalidate(venue_code: str) -> None:
    cache.delete(venue_config_key(venue_code))
    logger.debug("Invalidated cached configuration of venue %s", venue_code)


@receiver([post_save, post_delete], sender=Venue)
def invalidate_venue_cache(sender, instance, **kwargs):
    """Invalidate the configuration cache when a venue is saved or deleted."""
    _invalidate(instance.venue_code)


@receiver([post_save, post_delete], sender=VenueConfiguration)
@receiver([post_save, post_delete], sender=Location)
@receiver([post_save, post_delete], sender=Category)
@receiver([post_save, post_delete], sender=Priority)
def invalidate_venue_config_cache(sender, instance, **kwargs):
    """Invalidate the configuration cache when one of its rows changes."""
    venue_code = (
        Venue.objects.filter(pk=instance.venue_id).values_list("venue_code", flat=True).first()
    )
    if venue_code is not None:
        _invalidate(venue_code)
