"""
Activation key cache service.

Caches the kickstart session to activation key binding. A session's key
never changes once created, so entries only go away on expiry or when
the key is deleted.
"""
import logging
from typing import Iterable, Optional

from core.infrastructure.cache import CachePort
from core.infrastructure.cache_adapters import cache_adapter
from tokens.conf import activation_key_settings

logger = logging.getLogger(__name__)


class ActivationKeyCacheService:
    """Service for caching activation key lookups."""

    def __init__(self, cache: Optional[CachePort] = None):
        self.cache = cache or cache_adapter

    @staticmethod
    def _session_key(session_id: int) -> str:
        """Generate cache key for a kickstart session binding."""
        return f"activation_key:kickstart_session:{session_id}"

    async def get_key_for_session(self, session_id: int) -> Optional[str]:
        """
        Get the cached key string bound to a kickstart session.

        Args:
            session_id: Kickstart session ID

        Returns:
            Key string or None
        """
        return await self.cache.get(self._session_key(session_id))

    async def set_key_for_session(
        self, session_id: int, key: str, ttl: Optional[int] = None
    ) -> None:
        """
        Cache the key string bound to a kickstart session.

        Args:
            session_id: Kickstart session ID
            key: Activation key string
            ttl: Time to live in seconds, configured default when omitted
        """
        if ttl is None:
            ttl = activation_key_settings()["KICKSTART_SESSION_CACHE_TTL"]
        await self.cache.set(self._session_key(session_id), key, timeout=ttl)

    async def invalidate_session(self, session_id: int) -> None:
        """Drop the cached binding of a kickstart session."""
        await self.cache.delete(self._session_key(session_id))
        logger.debug("Invalidated kickstart session %s binding", session_id)

    async def invalidate_sessions(self, session_ids: Iterable[int]) -> None:
        """Drop the cached bindings of several kickstart sessions."""
        await self.cache.delete_many(self._session_key(session_id) for session_id in session_ids)
