"""
Django cache implementation of CachePort.
"""

import logging
from typing import Any, Iterable, Optional

from asgiref.sync import sync_to_async
from django.core.cache import cache

from core.infrastructure.cache import CachePort
from core.metrics import cache_hits_total, cache_misses_total

logger = logging.getLogger(__name__)


def _cache_namespace(key: str) -> str:
    """Metric label for a cache key: everything before the last segment."""
    return key.rsplit(":", 1)[0]


class DjangoCacheAdapter(CachePort):
    """
    CachePort over Django's cache framework.

    Redis backs it in dev and prod, locmem in tests. Backend errors are
    logged; reads report them as misses.
    """

    async def get(self, key: str) -> Optional[Any]:
        namespace = _cache_namespace(key)
        try:
            value = await sync_to_async(cache.get)(key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Cache read failed for %s: %s", key, e, exc_info=True)
            cache_misses_total.labels(cache=namespace).inc()
            return None

        if value is None:
            cache_misses_total.labels(cache=namespace).inc()
        else:
            cache_hits_total.labels(cache=namespace).inc()
        logger.debug("Cache %s: %s", "miss" if value is None else "hit", key)
        return value

    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        try:
            await sync_to_async(cache.set)(key, value, timeout=timeout)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Cache write failed for %s: %s", key, e, exc_info=True)

    async def delete(self, key: str) -> None:
        await self.delete_many([key])

    async def delete_many(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        if not keys:
            return
        try:
            await sync_to_async(cache.delete_many)(keys)
            logger.debug("Cache evicted %d key(s)", len(keys))
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Cache eviction failed for %s: %s", keys, e, exc_info=True)


cache_adapter = DjangoCacheAdapter()
