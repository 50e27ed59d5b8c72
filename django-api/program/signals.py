"""Django signals for cache invalidation and school item totals.

Any change to schools or items invalidates the cached program and item counts.
Item changes also refresh the owning school's total_items.
"""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from program.handlers.views import ITEM_COUNTS_CACHE_KEY, PROGRAM_CACHE_KEY
from program.logging import get_logger
from program.models import Item, School

logger = get_logger(__name__)


def invalidate_program_cache() -> None:
    cache.delete_many([PROGRAM_CACHE_KEY, ITEM_COUNTS_CACHE_KEY])


@receiver([post_save, post_delete], sender=School)
def invalidate_on_school_change(sender, instance, **kwargs):
    """Invalidate caches when a school is saved or deleted."""
    invalidate_program_cache()
    logger.debug("program_cache_invalidated", sender="school", id=str(instance.pk))


@receiver([post_save, post_delete], sender=Item)
def invalidate_on_item_change(sender, instance, **kwargs):
    """Invalidate caches when an item is saved or deleted."""
    invalidate_program_cache()
    logger.debug("program_cache_invalidated", sender="item", id=str(instance.pk))


@receiver([post_save, post_delete], sender=Item)
def sync_school_total_items(sender, instance, **kwargs):
    """Keep School.total_items equal to the school's item count."""
    total = Item.objects.filter(school_id=instance.school_id).count()
    # update() skips post_save, so the school receiver does not fire again
    School.objects.filter(pk=instance.school_id).update(total_items=total)
