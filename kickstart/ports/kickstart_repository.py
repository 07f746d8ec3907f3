"""
Kickstart repository port (interface).

This defines the contract for provisioning profile and session
persistence. Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from kickstart.domain.kickstart import KickstartData, KickstartSession


class KickstartRepository(ABC):
    """
    Abstract repository for kickstart profiles and sessions.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save_profile(self, profile: KickstartData) -> KickstartData:
        """
        Save a kickstart profile, including its default tokens.

        Args:
            profile: KickstartData entity to save

        Returns:
            Saved profile
        """

    @abstractmethod
    async def find_profile_by_id(self, profile_id: int) -> Optional[KickstartData]:
        """
        Find a kickstart profile by ID.

        Args:
            profile_id: Profile id

        Returns:
            KickstartData entity or None if not found
        """

    @abstractmethod
    async def find_profiles_by_default_token(self, token_id: int) -> List[KickstartData]:
        """
        Find every profile that registers servers with the given token.

        Args:
            token_id: Activation key token id

        Returns:
            List of KickstartData entities
        """

    @abstractmethod
    async def save_session(self, session: KickstartSession) -> KickstartSession:
        """Save a kickstart session and return it with its id assigned."""

    @abstractmethod
    async def find_session_by_id(self, session_id: int) -> Optional[KickstartSession]:
        """Find a kickstart session by ID, or None if not found."""
