"""
Channel repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from servers.domain.channel import Channel


class ChannelRepository(ABC):
    """Abstract repository for Channel entities."""

    @abstractmethod
    async def save(self, channel: Channel) -> Channel:
        """Save a channel entity and return it with its id assigned."""

    @abstractmethod
    async def find_by_id(self, channel_id: int) -> Optional[Channel]:
        """Find a channel by ID, or None if not found."""

    @abstractmethod
    async def find_by_ids(self, channel_ids: List[int]) -> List[Channel]:
        """Find every channel whose id is in channel_ids."""
