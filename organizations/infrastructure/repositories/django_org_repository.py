"""
Django implementation of OrgRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async

from organizations.domain.org import Org
from organizations.infrastructure.models import Org as OrgModel
from organizations.ports.org_repository import OrgRepository


class DjangoOrgRepository(OrgRepository):
    """Django ORM implementation of OrgRepository."""

    def _to_domain(self, model: OrgModel) -> Org:
        return Org(
            id=model.id,
            name=model.name,
            default_token_id=model.default_token_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @sync_to_async
    def save(self, org: Org) -> Org:
        """
        Save an org entity.

        Args:
            org: Org entity to save

        Returns:
            Saved org entity
        """
        if org.id is None:
            model = OrgModel(name=org.name, default_token_id=org.default_token_id)
        else:
            # pylint: disable=no-member
            model = OrgModel.objects.get(id=org.id)
            model.name = org.name
            model.default_token_id = org.default_token_id
        model.save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, org_id: int) -> Optional[Org]:
        """
        Find an org by ID.

        Args:
            org_id: Org id

        Returns:
            Org entity or None if not found
        """
        try:
            model = OrgModel.objects.get(id=org_id)  # pylint: disable=no-member
            return self._to_domain(model)
        except OrgModel.DoesNotExist:  # pylint: disable=no-member
            return None
