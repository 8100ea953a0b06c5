import logging

from celery import shared_task

from .api.errors import ApiError
from .lookups import COMMON_LOOKUPS, LookupCache

logger = logging.getLogger(__name__)


@shared_task
def warm_lookup_cache(names=None):
    """
    Refresh the shared dropdown lookups (scheduled by CELERY_BEAT_SCHEDULE).
    A collection that fails keeps whatever the cache already holds.
    """
    cache = LookupCache()
    warmed = {}
    for name in names or COMMON_LOOKUPS:
        try:
            warmed.update(cache.warm([name]))
        except ApiError as e:
            logger.warning(f"CELERY BEAT: lookup '{name}' not refreshed: {e}")
    logger.info(f"CELERY BEAT: lookups refreshed {warmed}")
    return warmed
