"""
Django implementation of ServerRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async
from django.db import transaction

from servers.domain.server import Server
from servers.infrastructure.models import Server as ServerModel
from servers.infrastructure.reference_data import group_type_models, group_type_to_domain
from servers.ports.server_repository import ServerRepository


class DjangoServerRepository(ServerRepository):
    """
    Django ORM implementation of ServerRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: ServerModel) -> Server:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Server model

        Returns:
            Server domain entity
        """
        return Server(
            id=model.id,
            org_id=model.org_id,
            name=model.name,
            entitled_group_types=tuple(
                group_type_to_domain(row) for row in model.entitlements.all()
            ),
        )

    @sync_to_async
    def save(self, server: Server) -> Server:
        """
        Save a server entity.

        Args:
            server: Server entity to save

        Returns:
            Saved server entity
        """
        with transaction.atomic():
            if server.id is None:
                model = ServerModel(org_id=server.org_id, name=server.name)
            else:
                model = ServerModel.objects.get(id=server.id)  # pylint: disable=no-member
                model.org_id = server.org_id
                model.name = server.name
            model.save()
            model.entitlements.set(group_type_models(server.entitled_group_types))
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, server_id: int) -> Optional[Server]:
        """
        Find a server by ID.

        Args:
            server_id: Server id

        Returns:
            Server entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = ServerModel.objects.prefetch_related("entitlements").get(id=server_id)
            return self._to_domain(model)
        except ServerModel.DoesNotExist:  # pylint: disable=no-member
            return None
