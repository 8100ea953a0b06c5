"""
Shared lookup cache for dropdown collections (countries, banks, cities...).

Read-through over Django's cache framework, keyed by collection name, expired
by ``LOOKUP_CACHE_TTL`` and dropped whenever the portal mutates that
collection. Pages ask the cache instead of re-fetching the same master data
on every form.
"""
import logging

from django.conf import settings
from django.core.cache import cache as default_cache

from .api.client import ApiClient
from .resources import all_resources, find_resource
from .serializers import STATUS_ACTIVE

logger = logging.getLogger(__name__)

KEY_PREFIX = 'lookups'

# Refreshed by the periodic warm-up task.
COMMON_LOOKUPS = ('countries', 'provinces', 'cities', 'banks', 'currencies')


def _resource(name):
    resource = find_resource(name)
    if resource is None:
        raise KeyError(f"Unknown lookup collection: {name}")
    return resource


def active_only(items):
    """Dropdowns list Active entries; entities without a Status are always listed."""
    return [item for item in items if item.get('Status', STATUS_ACTIVE) in (STATUS_ACTIVE, None)]


class LookupCache:
    def __init__(self, client=None, cache=None, ttl=None):
        self.client = client or ApiClient()
        self.cache = cache or default_cache
        self.ttl = settings.LOOKUP_CACHE_TTL if ttl is None else ttl

    @staticmethod
    def key(name):
        return f"{KEY_PREFIX}:{name}"

    def _fetch(self, name):
        resource = _resource(name)
        items = self.client.list(resource.path, resource.serializer, default_error=resource.fetch_error)
        self.cache.set(self.key(name), items, self.ttl)
        return items

    def all(self, name):
        """Every cached entry of ``name``, fetching on a miss."""
        items = self.cache.get(self.key(name))
        if items is None:
            logger.debug(f"Lookup cache miss: {name}")
            items = self._fetch(name)
        return items

    def get(self, name):
        return active_only(self.all(name))

    def get_many(self, names):
        """
        Active entries of several collections; misses are fetched concurrently.

        Raises ``JoinError`` if any miss fails to load, in which case nothing
        new is cached.
        """
        names = list(dict.fromkeys(names))
        found = self.cache.get_many([self.key(name) for name in names])
        results = {name: found[self.key(name)] for name in names if self.key(name) in found}

        misses = [name for name in names if name not in results]
        if misses:
            logger.debug(f"Lookup cache miss: {', '.join(misses)}")
            requests_by_name = {}
            for name in misses:
                resource = _resource(name)
                requests_by_name[name] = (resource.path, resource.serializer)
            fetched = self.client.fetch_many(requests_by_name)
            self.cache.set_many({self.key(name): items for name, items in fetched.items()}, self.ttl)
            results.update(fetched)

        return {name: active_only(results[name]) for name in names}

    def invalidate(self, name=None):
        if name is None:
            self.cache.delete_many([self.key(resource.key) for resource in all_resources()])
        else:
            self.cache.delete(self.key(name))

    def warm(self, names=COMMON_LOOKUPS):
        """Force-refresh ``names``; returns how many entries each one holds."""
        counts = {}
        for name in names:
            counts[name] = len(self._fetch(name))
        return counts
