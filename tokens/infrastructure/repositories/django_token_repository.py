"""
Django implementation of TokenRepository port.
"""
from typing import Optional

from asgiref.sync import sync_to_async

from tokens.domain.activation_key import Token
from tokens.infrastructure.models import Token as TokenModel
from tokens.infrastructure.repositories.django_activation_key_repository import (
    token_to_domain,
)
from tokens.ports.token_repository import TokenRepository


class DjangoTokenRepository(TokenRepository):
    """Django ORM implementation of TokenRepository."""

    @sync_to_async
    def find_by_id(self, token_id: int, org_id: int) -> Optional[Token]:
        """
        Find a token by ID within an org.

        Args:
            token_id: Token ID
            org_id: Owning org ID

        Returns:
            Token entity or None if not found in that org
        """
        try:
            # pylint: disable=no-member
            model = (
                TokenModel.objects.select_related("contact_method")
                .prefetch_related("channels", "entitlements", "activated_servers")
                .get(id=token_id, org_id=org_id)
            )
            return token_to_domain(model)
        except TokenModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def record_activation(self, token_id: int, server_id: int) -> None:
        # pylint: disable=no-member
        model = TokenModel.objects.get(id=token_id)
        model.activated_servers.add(server_id)
