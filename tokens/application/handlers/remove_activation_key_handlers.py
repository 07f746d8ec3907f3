"""
Handlers for activation key removal commands.
"""
import logging

from core.infrastructure.events import event_bus
from core.metrics import activation_keys_removed_total
from tokens.application.commands.remove_activation_keys import (
    RemoveActivationKeyCommand,
    RemoveServerActivationKeysCommand,
)
from tokens.domain.events import ActivationKeyRemoved
from tokens.ports.activation_key_repository import ActivationKeyRepository

logger = logging.getLogger(__name__)


class RemoveActivationKeyHandler:
    """Handler for RemoveActivationKeyCommand."""

    def __init__(self, activation_key_repository: ActivationKeyRepository):
        """Initialize handler with repository."""
        self.activation_key_repository = activation_key_repository

    async def handle(self, command: RemoveActivationKeyCommand) -> int:
        """
        Delete a key together with its token.

        Every key sharing the token goes with it: removing a kickstart
        session key also removes the root key and the other session keys.

        Args:
            command: RemoveActivationKeyCommand

        Returns:
            Number of activation keys deleted
        """
        activation_key = command.activation_key
        affected = [activation_key]
        if activation_key.token.id is not None:
            affected = (
                await self.activation_key_repository.find_by_token_id(activation_key.token.id)
                or affected
            )

        count = await self.activation_key_repository.delete_by_key(activation_key.key)
        if count == 0:
            return 0

        logger.info(
            "Removed activation key %s and %d key(s) sharing its token",
            activation_key.key,
            count - 1,
        )
        activation_keys_removed_total.labels(reason="key").inc(count)
        await event_bus.publish(
            ActivationKeyRemoved(
                aggregate_id=activation_key.key,
                keys=tuple(removed.key for removed in affected),
                kickstart_session_ids=tuple(
                    removed.kickstart_session_id
                    for removed in affected
                    if removed.kickstart_session_id is not None
                ),
                server_id=activation_key.server_id,
                count=count,
            )
        )
        return count


class RemoveServerActivationKeysHandler:
    """Handler for RemoveServerActivationKeysCommand."""

    def __init__(self, activation_key_repository: ActivationKeyRepository):
        """Initialize handler with repository."""
        self.activation_key_repository = activation_key_repository

    async def handle(self, command: RemoveServerActivationKeysCommand) -> int:
        """
        Delete every activation key bound to a server.

        Args:
            command: RemoveServerActivationKeysCommand

        Returns:
            Number of activation keys deleted (0 when none are left)
        """
        bound = await self.activation_key_repository.find_by_server(command.server_id)
        count = await self.activation_key_repository.delete_by_server(command.server_id)
        if count == 0:
            return 0

        logger.info("Removed %d activation key(s) bound to server %s", count, command.server_id)
        activation_keys_removed_total.labels(reason="server").inc(count)
        await event_bus.publish(
            ActivationKeyRemoved(
                aggregate_id=str(command.server_id),
                keys=tuple(activation_key.key for activation_key in bound),
                kickstart_session_ids=tuple(
                    activation_key.kickstart_session_id
                    for activation_key in bound
                    if activation_key.kickstart_session_id is not None
                ),
                server_id=command.server_id,
                count=count,
            )
        )
        return count
