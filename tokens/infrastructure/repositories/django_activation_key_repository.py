"""
Django implementation of ActivationKeyRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.utils import timezone

from core.domain.exceptions import ActivationKeyExistsError, OrgNotFoundError
from organizations.infrastructure.models import Org as OrgModel
from servers.infrastructure.reference_data import (
    contact_method_model,
    contact_method_to_domain,
    group_type_models,
    group_type_to_domain,
)
from tokens.domain.activation_key import ActivationKey, Token
from tokens.infrastructure.models import ActivationKey as ActivationKeyModel
from tokens.infrastructure.models import Token as TokenModel
from tokens.ports.activation_key_repository import ActivationKeyRepository


def token_to_domain(model: TokenModel) -> Token:
    """
    Convert a Token row (with its relations) to the domain entity.

    Args:
        model: Django Token model

    Returns:
        Token domain entity
    """
    return Token(
        id=model.id,
        org_id=model.org_id,
        note=model.note,
        usage_limit=model.usage_limit,
        disabled=model.disabled,
        deploy_configs=model.deploy_configs,
        creator_id=model.creator_id,
        server_id=model.server_id,
        base_channel_id=model.base_channel_id,
        channel_ids=tuple(channel.id for channel in model.channels.all()),
        entitlements=tuple(group_type_to_domain(row) for row in model.entitlements.all()),
        contact_method=contact_method_to_domain(model.contact_method),
        activated_server_ids=tuple(server.id for server in model.activated_servers.all()),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class DjangoActivationKeyRepository(ActivationKeyRepository):
    """
    Django ORM implementation of ActivationKeyRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Writes a key, its token and the token's relations in one transaction
    3. Implements repository interface
    """

    def _queryset(self):
        # pylint: disable=no-member
        return ActivationKeyModel.objects.select_related(
            "token", "token__contact_method"
        ).prefetch_related(
            "token__channels", "token__entitlements", "token__activated_servers"
        )

    def _to_domain(self, model: ActivationKeyModel) -> ActivationKey:
        """
        Convert Django model to domain entity.

        Args:
            model: Django ActivationKey model

        Returns:
            ActivationKey domain entity
        """
        return ActivationKey(
            id=model.id,
            key=model.key,
            token=token_to_domain(model.token),
            kickstart_session_id=model.kickstart_session_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save_token(self, token: Token) -> TokenModel:
        if token.id is None:
            model = TokenModel(org_id=token.org_id)
        else:
            model = TokenModel.objects.get(id=token.id)  # pylint: disable=no-member
            model.org_id = token.org_id
        model.note = token.note
        model.usage_limit = token.usage_limit
        model.disabled = token.disabled
        model.deploy_configs = token.deploy_configs
        model.creator_id = token.creator_id
        model.server_id = token.server_id
        model.base_channel_id = token.base_channel_id
        model.contact_method = contact_method_model(token.contact_method)
        model.save()

        model.channels.set(token.channel_ids)
        model.entitlements.set(group_type_models(token.entitlements))
        model.activated_servers.set(token.activated_server_ids)
        return model

    def _save_key(self, activation_key: ActivationKey) -> ActivationKeyModel:
        token_model = self._save_token(activation_key.token)
        if activation_key.id is None:
            model = ActivationKeyModel(key=activation_key.key, token=token_model)
        else:
            # pylint: disable=no-member
            model = ActivationKeyModel.objects.get(id=activation_key.id)
            model.key = activation_key.key
            model.token = token_model
        model.kickstart_session_id = activation_key.kickstart_session_id
        model.save()
        return model

    def _write(self, activation_key: ActivationKey, universal_default: bool) -> ActivationKey:
        """
        Write a key in one transaction, optionally promoting its token.

        A unique-key violation that slipped past validation (for example a
        prefixed name colliding with an existing key) surfaces as
        ActivationKeyExistsError.
        """
        try:
            with transaction.atomic():
                model = self._save_key(activation_key)
                if universal_default:
                    # pylint: disable=no-member
                    promoted = OrgModel.objects.filter(id=model.token.org_id).update(
                        default_token_id=model.token_id, updated_at=timezone.now()
                    )
                    if not promoted:
                        raise OrgNotFoundError(f"Organization {model.token.org_id} not found")
        except IntegrityError as e:
            clashing = ActivationKeyModel.objects.filter(  # pylint: disable=no-member
                key=activation_key.key
            )
            if activation_key.id is not None:
                clashing = clashing.exclude(id=activation_key.id)
            if clashing.exists():
                raise ActivationKeyExistsError(activation_key.key) from e
            raise

        return self._to_domain(self._queryset().get(id=model.id))

    @sync_to_async
    def save(self, activation_key: ActivationKey) -> ActivationKey:
        """
        Save an activation key and its token.

        Args:
            activation_key: ActivationKey entity to save

        Returns:
            Saved activation key entity

        Raises:
            ActivationKeyExistsError: If another key already uses the key string
        """
        return self._write(activation_key, universal_default=False)

    @sync_to_async
    def save_as_universal_default(self, activation_key: ActivationKey) -> ActivationKey:
        """
        Save an activation key and point its org's default token at it.

        Args:
            activation_key: ActivationKey entity to save

        Returns:
            Saved activation key entity

        Raises:
            OrgNotFoundError: If the key's org does not exist
            ActivationKeyExistsError: If another key already uses the key string
        """
        return self._write(activation_key, universal_default=True)

    @sync_to_async
    def find_by_key(self, key: str) -> Optional[ActivationKey]:
        """
        Find an activation key by its key string.

        Args:
            key: Exact key string

        Returns:
            ActivationKey entity or None if not found
        """
        try:
            return self._to_domain(self._queryset().get(key=key))
        except ActivationKeyModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def exists(self, key: str) -> bool:
        return ActivationKeyModel.objects.filter(key=key).exists()  # pylint: disable=no-member

    @sync_to_async
    def find_root_by_token_id(self, token_id: int) -> Optional[ActivationKey]:
        """
        Find the key of a token that is not bound to a kickstart session.

        Args:
            token_id: Token ID

        Returns:
            ActivationKey entity or None if not found
        """
        model = (
            self._queryset()
            .filter(token_id=token_id, kickstart_session__isnull=True)
            .order_by("id")
            .first()
        )
        return self._to_domain(model) if model else None

    @sync_to_async
    def find_by_kickstart_session(self, session_id: int) -> Optional[ActivationKey]:
        model = self._queryset().filter(kickstart_session_id=session_id).order_by("id").first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def find_by_token_id(self, token_id: int) -> List[ActivationKey]:
        models = self._queryset().filter(token_id=token_id).order_by("id")
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def find_by_server(self, server_id: int) -> List[ActivationKey]:
        """
        Find all keys whose token is bound to a server.

        Args:
            server_id: Server ID

        Returns:
            List of ActivationKey entities
        """
        models = self._queryset().filter(token__server_id=server_id)
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def find_by_activated_server(self, server_id: int) -> List[ActivationKey]:
        """
        Find all keys whose token was used to activate a server.

        Args:
            server_id: Server ID

        Returns:
            List of ActivationKey entities
        """
        models = self._queryset().filter(token__activated_servers__id=server_id).distinct()
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def delete_by_server(self, server_id: int) -> int:
        """
        Delete every key bound to a server, with its token.

        Args:
            server_id: Server ID

        Returns:
            Number of activation keys deleted
        """
        # pylint: disable=no-member
        _, deleted = TokenModel.objects.filter(server_id=server_id).delete()
        return deleted.get(ActivationKeyModel._meta.label, 0)

    @sync_to_async
    def delete_by_key(self, key: str) -> int:
        """
        Delete a key by its key string, with its token.

        Args:
            key: Exact key string

        Returns:
            Number of activation keys deleted
        """
        # pylint: disable=no-member
        _, deleted = TokenModel.objects.filter(activation_keys__key=key).delete()
        return deleted.get(ActivationKeyModel._meta.label, 0)
