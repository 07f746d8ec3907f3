"""
Token repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import Optional

from tokens.domain.activation_key import Token


class TokenRepository(ABC):
    """Abstract repository for Token entities."""

    @abstractmethod
    async def find_by_id(self, token_id: int, org_id: int) -> Optional[Token]:
        """
        Find a token by ID within an org.

        Args:
            token_id: Token ID
            org_id: Owning org ID

        Returns:
            Token entity or None if not found in that org
        """
        pass

    @abstractmethod
    async def record_activation(self, token_id: int, server_id: int) -> None:
        """
        Add a server to a token's activation history.

        Args:
            token_id: Token ID
            server_id: Server the token registered
        """
        pass
