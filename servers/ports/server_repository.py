"""
Server repository port (interface).

This defines the contract for server persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from servers.domain.server import Server


class ServerRepository(ABC):
    """
    Abstract repository for Server entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, server: Server) -> Server:
        """
        Save a server entity, including its entitlements.

        Args:
            server: Server entity to save

        Returns:
            Saved server entity
        """

    @abstractmethod
    async def find_by_id(self, server_id: int) -> Optional[Server]:
        """
        Find a server by ID.

        Args:
            server_id: Server id

        Returns:
            Server entity or None if not found
        """
