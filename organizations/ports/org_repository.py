"""
Org repository port (interface).

This defines the contract for organization persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from organizations.domain.org import Org


class OrgRepository(ABC):
    """
    Abstract repository for Org entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, org: Org) -> Org:
        """
        Save an org entity.

        Args:
            org: Org entity to save

        Returns:
            Saved org entity (with id assigned)
        """

    @abstractmethod
    async def find_by_id(self, org_id: int) -> Optional[Org]:
        """
        Find an org by ID.

        Args:
            org_id: Org id

        Returns:
            Org entity or None if not found
        """
