"""
Activation key registry.

The single entry point for creating, looking up and deleting activation
keys. The registry holds no state of its own; persistence goes through
the repositories it is constructed with.
"""
import logging
from typing import List, Optional

from kickstart.domain.kickstart import KickstartData, KickstartSession
from kickstart.infrastructure.repositories.django_kickstart_repository import (
    DjangoKickstartRepository,
)
from kickstart.ports.kickstart_repository import KickstartRepository
from organizations.domain.org import Org
from organizations.domain.user import User
from organizations.infrastructure.repositories.django_org_repository import DjangoOrgRepository
from organizations.ports.org_repository import OrgRepository
from servers.domain.channel import Channel
from servers.domain.server import Server
from tokens.application.commands.create_activation_key import CreateActivationKeyCommand
from tokens.application.commands.remove_activation_keys import (
    RemoveActivationKeyCommand,
    RemoveServerActivationKeysCommand,
)
from tokens.application.handlers.create_activation_key_handler import CreateActivationKeyHandler
from tokens.application.handlers.remove_activation_key_handlers import (
    RemoveActivationKeyHandler,
    RemoveServerActivationKeysHandler,
)
from tokens.application.services.activation_key_cache_service import ActivationKeyCacheService
from tokens.domain.activation_key import ActivationKey, Token
from tokens.domain.services import ActivationKeyGenerator, KeyNameValidator
from tokens.infrastructure.repositories.django_activation_key_repository import (
    DjangoActivationKeyRepository,
)
from tokens.infrastructure.repositories.django_token_repository import DjangoTokenRepository
from tokens.ports.activation_key_repository import ActivationKeyRepository
from tokens.ports.token_repository import TokenRepository

logger = logging.getLogger(__name__)


class ActivationKeyRegistry:
    """
    Create, validate, look up and remove activation keys.

    Lookups never raise for missing records: they return None (single
    results) or an empty list. Key name validation is the only failure
    raised on purpose.
    """

    def __init__(
        self,
        activation_key_repository: ActivationKeyRepository,
        token_repository: TokenRepository,
        org_repository: OrgRepository,
        kickstart_repository: KickstartRepository,
        cache_service: Optional[ActivationKeyCacheService] = None,
    ):
        """Initialize registry with repositories."""
        self.activation_key_repository = activation_key_repository
        self.token_repository = token_repository
        self.org_repository = org_repository
        self.kickstart_repository = kickstart_repository
        self.cache_service = cache_service or ActivationKeyCacheService()

    # Lookups

    async def lookup_by_key(self, key: Optional[str]) -> Optional[ActivationKey]:
        """
        Look up an activation key by its exact key string.

        Args:
            key: Key string, None or empty for no lookup

        Returns:
            ActivationKey or None
        """
        if not key:
            return None
        return await self.activation_key_repository.find_by_key(key)

    async def lookup_by_token(self, token: Optional[Token]) -> Optional[ActivationKey]:
        """
        Look up the root key of a token.

        Keys created for a kickstart session share their token with the
        root key and are never returned here.

        Args:
            token: Token entity

        Returns:
            ActivationKey without a kickstart session, or None
        """
        if token is None or token.id is None:
            return None
        return await self.activation_key_repository.find_root_by_token_id(token.id)

    async def lookup_by_id(
        self, token_id: Optional[int], org: Optional[Org]
    ) -> Optional[ActivationKey]:
        """
        Look up a key by its token id, restricted to an org.

        Args:
            token_id: Token ID
            org: Org the token must belong to

        Returns:
            ActivationKey or None
        """
        if token_id is None or org is None:
            return None
        token = await self.token_repository.find_by_id(token_id, org.id)
        return await self.lookup_by_token(token)

    async def lookup_by_kickstart_session(
        self, session: Optional[KickstartSession]
    ) -> Optional[ActivationKey]:
        """
        Look up the key created for a kickstart session.

        The session to key binding is cached.

        Args:
            session: Kickstart session

        Returns:
            ActivationKey or None
        """
        if session is None or session.id is None:
            return None

        cached_key = await self.cache_service.get_key_for_session(session.id)
        if cached_key:
            activation_key = await self.activation_key_repository.find_by_key(cached_key)
            if activation_key and activation_key.kickstart_session_id == session.id:
                return activation_key
            await self.cache_service.invalidate_session(session.id)

        activation_key = await self.activation_key_repository.find_by_kickstart_session(
            session.id
        )
        if activation_key:
            await self.cache_service.set_key_for_session(session.id, activation_key.key)
        return activation_key

    async def lookup_by_server(self, server: Optional[Server]) -> Optional[List[ActivationKey]]:
        """
        Look up the re-registration keys bound to a server.

        Args:
            server: Server entity

        Returns:
            List of ActivationKey, or None when no server is given
        """
        if server is None or server.id is None:
            return None
        return await self.activation_key_repository.find_by_server(server.id)

    async def lookup_by_activated_server(self, server: Optional[Server]) -> List[ActivationKey]:
        """
        Look up the keys that were used to register a server.

        Args:
            server: Server entity

        Returns:
            List of ActivationKey
        """
        if server is None or server.id is None:
            return []
        return await self.activation_key_repository.find_by_activated_server(server.id)

    # Creation

    async def create_new_key(
        self,
        user: User,
        note: Optional[str] = None,
        *,
        server: Optional[Server] = None,
        key: Optional[str] = None,
        usage_limit: Optional[int] = 0,
        base_channel: Optional[Channel] = None,
        universal_default: bool = False,
    ) -> ActivationKey:
        """
        Create and persist an activation key.

        Called with only a user and a note this generates a key with no
        server binding, a usage limit of 0, no base channel, and does not
        touch the org's universal default.

        Args:
            user: Creating user, the key belongs to the user's org
            note: Free text description, "None" when blank
            server: Server to bind the key to (prefixes the key with "re-")
            key: Requested key name, generated when empty
            usage_limit: Maximum number of activations, None for unlimited
            base_channel: Base channel to subscribe the token to
            universal_default: Make the new key the org's universal default

        Returns:
            The persisted ActivationKey

        Raises:
            ActivationKeyValidationError: If the key name is rejected
        """
        handler = CreateActivationKeyHandler(
            activation_key_repository=self.activation_key_repository,
            org_repository=self.org_repository,
        )
        command = CreateActivationKeyCommand(
            user=user,
            server=server,
            key=key,
            note=note,
            usage_limit=usage_limit,
            base_channel=base_channel,
            universal_default=universal_default,
        )
        return await handler.handle(command)

    async def validate_key_name(self, key: str) -> None:
        """
        Validate a key name.

        Args:
            key: Candidate key string

        Raises:
            InvalidActivationKeyCharactersError: If the key has a comma or double quote
            ActivationKeyExistsError: If the key is already taken
        """
        await KeyNameValidator.validate(key, self.activation_key_repository)

    @staticmethod
    def generate_key() -> str:
        """Generate a random 32 character hex key."""
        return ActivationKeyGenerator.generate()

    async def save(self, activation_key: ActivationKey) -> ActivationKey:
        return await self.activation_key_repository.save(activation_key)

    async def record_activation(self, activation_key: ActivationKey, server: Server) -> None:
        """
        Add a server to the activation history of a key's token.

        Args:
            activation_key: Key the server registered with
            server: Registered server
        """
        await self.token_repository.record_activation(activation_key.token.id, server.id)
        logger.info("Server %s activated with key %s", server.id, activation_key.key)

    # Removal

    async def remove_keys_for_server(self, server_id: int) -> int:
        """
        Delete every key bound to a server.

        Args:
            server_id: Server ID

        Returns:
            Number of keys deleted; 0 on repeated calls
        """
        handler = RemoveServerActivationKeysHandler(self.activation_key_repository)
        return await handler.handle(RemoveServerActivationKeysCommand(server_id=server_id))

    async def remove_key(self, activation_key: Optional[ActivationKey]) -> None:
        """
        Delete a key and its token. Does nothing for None.

        Args:
            activation_key: Key to delete
        """
        if activation_key is None:
            return
        handler = RemoveActivationKeyHandler(self.activation_key_repository)
        await handler.handle(RemoveActivationKeyCommand(activation_key=activation_key))

    async def list_associated_kickstarts(
        self, activation_key: ActivationKey
    ) -> List[KickstartData]:
        """
        List the kickstart profiles that register servers with this key.

        Args:
            activation_key: Activation key

        Returns:
            List of KickstartData
        """
        if activation_key.token.id is None:
            return []
        return await self.kickstart_repository.find_profiles_by_default_token(
            activation_key.token.id
        )


# Default registry wired to the Django repositories
activation_key_registry = ActivationKeyRegistry(
    activation_key_repository=DjangoActivationKeyRepository(),
    token_repository=DjangoTokenRepository(),
    org_repository=DjangoOrgRepository(),
    kickstart_repository=DjangoKickstartRepository(),
)
