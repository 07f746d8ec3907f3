"""
Activation key repository port (interface).

This defines the contract for activation key persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from tokens.domain.activation_key import ActivationKey


class ActivationKeyRepository(ABC):
    """
    Abstract repository for ActivationKey entities.

    A saved key is written together with its token, channels and
    entitlements as one unit.
    """

    @abstractmethod
    async def save(self, activation_key: ActivationKey) -> ActivationKey:
        """
        Save an activation key and its token.

        Args:
            activation_key: ActivationKey entity to save

        Returns:
            Saved activation key entity (with ids assigned)
        """
        pass

    @abstractmethod
    async def save_as_universal_default(self, activation_key: ActivationKey) -> ActivationKey:
        """
        Save an activation key and make its token the org's universal default.

        Both writes commit together or not at all.

        Args:
            activation_key: ActivationKey entity to save

        Returns:
            Saved activation key entity

        Raises:
            OrgNotFoundError: If the key's org does not exist
        """
        pass

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[ActivationKey]:
        """
        Find an activation key by its key string.

        Args:
            key: Exact key string

        Returns:
            ActivationKey entity or None if not found
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """
        Check whether a key string is already taken.

        Args:
            key: Exact key string

        Returns:
            True if a stored key has this string
        """
        pass

    @abstractmethod
    async def find_root_by_token_id(self, token_id: int) -> Optional[ActivationKey]:
        """
        Find the key of a token that is not bound to a kickstart session.

        Args:
            token_id: Token ID

        Returns:
            ActivationKey entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_kickstart_session(self, session_id: int) -> Optional[ActivationKey]:
        """
        Find the key created for a kickstart session.

        Args:
            session_id: Kickstart session ID

        Returns:
            ActivationKey entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_token_id(self, token_id: int) -> List[ActivationKey]:
        """
        Find every key sharing a token: the root key and its kickstart session keys.

        Args:
            token_id: Token ID

        Returns:
            List of ActivationKey entities, oldest first
        """
        pass

    @abstractmethod
    async def find_by_server(self, server_id: int) -> List[ActivationKey]:
        """
        Find all keys whose token is bound to a server.

        Args:
            server_id: Server ID

        Returns:
            List of ActivationKey entities
        """
        pass

    @abstractmethod
    async def find_by_activated_server(self, server_id: int) -> List[ActivationKey]:
        """
        Find all keys whose token was used to activate a server.

        Args:
            server_id: Server ID

        Returns:
            List of ActivationKey entities
        """
        pass

    @abstractmethod
    async def delete_by_server(self, server_id: int) -> int:
        """
        Delete every key bound to a server, with its token.

        Args:
            server_id: Server ID

        Returns:
            Number of activation keys deleted
        """
        pass

    @abstractmethod
    async def delete_by_key(self, key: str) -> int:
        """
        Delete a key by its key string, with its token.

        Args:
            key: Exact key string

        Returns:
            Number of activation keys deleted
        """
        pass
