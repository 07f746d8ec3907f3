"""
CreateActivationKeyHandler.

Handles the create activation key command.
"""
import logging

from core.domain.exceptions import ActivationKeyValidationError, OrgNotFoundError
from core.domain.value_objects import ContactMethod
from core.infrastructure.events import event_bus
from core.infrastructure.scrubber import scrub
from core.metrics import activation_key_validation_failures_total, activation_keys_created_total
from organizations.ports.org_repository import OrgRepository
from tokens.application.commands.create_activation_key import CreateActivationKeyCommand
from tokens.conf import activation_key_settings
from tokens.domain.activation_key import ActivationKey, Token
from tokens.domain.events import ActivationKeyCreated, UniversalDefaultChanged
from tokens.domain.services import (
    ActivationKeyGenerator,
    KeyNameValidator,
    derive_default_entitlements,
    normalize_key,
    sanitize_key,
)
from tokens.ports.activation_key_repository import ActivationKeyRepository

logger = logging.getLogger(__name__)


class CreateActivationKeyHandler:
    """Handler for CreateActivationKeyCommand."""

    def __init__(
        self,
        activation_key_repository: ActivationKeyRepository,
        org_repository: OrgRepository,
    ):
        """Initialize handler with repositories."""
        self.activation_key_repository = activation_key_repository
        self.org_repository = org_repository

    async def handle(self, command: CreateActivationKeyCommand) -> ActivationKey:
        """
        Handle create activation key command.

        Args:
            command: CreateActivationKeyCommand

        Returns:
            The persisted ActivationKey

        Raises:
            InvalidActivationKeyCharactersError: If the key has a comma or double quote
            ActivationKeyExistsError: If the key is already taken
            OrgNotFoundError: If the key must become the universal default
                of an org that does not exist
        """
        config = activation_key_settings()
        user = command.user
        server = command.server

        # Key name
        key = normalize_key(command.key)
        if not key:
            key = ActivationKeyGenerator.generate()
        key = sanitize_key(user.org_id, key, prefix_with_org=config["ORG_PREFIX_KEYS"])

        try:
            await KeyNameValidator.validate(key, self.activation_key_repository)
        except ActivationKeyValidationError as e:
            activation_key_validation_failures_total.labels(code=e.code).inc()
            raise

        if server is not None:
            key = config["SERVER_KEY_PREFIX"] + key

        # Token settings
        note = command.note
        if note is None or not note.strip():
            note = config["DEFAULT_NOTE"]

        token = Token.create(
            org_id=user.org_id,
            creator_id=user.id,
            server_id=server.id if server is not None else None,
            note=scrub(note),
            usage_limit=command.usage_limit,
        )
        if command.base_channel is not None:
            token = token.set_base_channel(command.base_channel.id)
        token = token.add_entitlements(derive_default_entitlements(server))
        token = token.with_contact_method(ContactMethod.default())

        org = None
        if command.universal_default:
            org = await self.org_repository.find_by_id(user.org_id)
            if not org:
                raise OrgNotFoundError(f"Organization {user.org_id} not found")

        activation_key = ActivationKey.create(key=key, token=token)
        try:
            if org is not None:
                saved = await self.activation_key_repository.save_as_universal_default(
                    activation_key
                )
            else:
                saved = await self.activation_key_repository.save(activation_key)
        except ActivationKeyValidationError as e:
            # The final key string, prefix included, is already taken
            activation_key_validation_failures_total.labels(code=e.code).inc()
            raise

        logger.info(
            "Created activation key %s for org %s (server=%s)",
            saved.key,
            saved.org_id,
            saved.server_id,
        )
        activation_keys_created_total.labels(
            org_id=str(saved.org_id), server_bound=str(server is not None).lower()
        ).inc()
        await event_bus.publish(
            ActivationKeyCreated(
                aggregate_id=saved.key,
                key=saved.key,
                org_id=saved.org_id,
                token_id=saved.token.id,
                server_id=saved.server_id,
                creator_id=saved.creator_id,
            )
        )

        if org is not None:
            logger.info(
                "Activation key %s is now the universal default for org %s",
                saved.key,
                org.id,
            )
            await event_bus.publish(
                UniversalDefaultChanged(
                    aggregate_id=str(org.id),
                    org_id=org.id,
                    token_id=saved.token.id,
                    key=saved.key,
                )
            )

        return saved
