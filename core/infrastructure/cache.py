"""
Cache port.

Activation key lookups that cannot change once written, such as the key
bound to a kickstart session, are memoised through this port. Removing a
token can orphan several entries at once, so the port deletes in bulk.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional


class CachePort(ABC):
    """
    Key/value cache used by the application services.

    Implementations never raise for backend trouble; a failed read is a miss.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Read a cached value.

        Args:
            key: Cache key

        Returns:
            The value, or None on a miss
        """

    @abstractmethod
    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key
            value: Value to store
            timeout: Seconds to keep the entry, None to keep it until evicted
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Drop one entry."""

    @abstractmethod
    async def delete_many(self, keys: Iterable[str]) -> None:
        """Drop several entries in one round trip."""
