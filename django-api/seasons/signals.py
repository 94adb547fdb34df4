"""Django signals for cache invalidation."""

import logging

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from seasons.cache_keys import season_list_key
from seasons.models import Season

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Season)
def invalidate_season_cache(sender, instance, **kwargs):
    """Invalidate the host's cached season lists when a season changes."""
    cache.delete_many(
        [
            season_list_key(instance.host_id, instance.year),
            season_list_key(instance.host_id),
        ]
    )
    logger.debug("Invalidated season cache for host %s, year %s", instance.host_id, instance.year)
