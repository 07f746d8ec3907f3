"""
Django implementation of KickstartRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import transaction

from kickstart.domain.kickstart import KickstartData, KickstartSession
from kickstart.infrastructure.models import KickstartData as KickstartDataModel
from kickstart.infrastructure.models import KickstartSession as KickstartSessionModel
from kickstart.ports.kickstart_repository import KickstartRepository


class DjangoKickstartRepository(KickstartRepository):
    """Django ORM implementation of KickstartRepository."""

    def _profile_to_domain(self, model: KickstartDataModel) -> KickstartData:
        return KickstartData(
            id=model.id,
            org_id=model.org_id,
            label=model.label,
            active=model.active,
            default_token_ids=tuple(
                token.id for token in model.default_reg_tokens.order_by("id")
            ),
        )

    def _session_to_domain(self, model: KickstartSessionModel) -> KickstartSession:
        return KickstartSession(
            id=model.id,
            kickstart_data_id=model.kickstart_data_id,
            org_id=model.org_id,
            server_id=model.server_id,
            created_at=model.created_at,
        )

    @sync_to_async
    def save_profile(self, profile: KickstartData) -> KickstartData:
        with transaction.atomic():
            if profile.id is None:
                model = KickstartDataModel(org_id=profile.org_id)
            else:
                # pylint: disable=no-member
                model = KickstartDataModel.objects.get(id=profile.id)
            model.label = profile.label
            model.active = profile.active
            model.save()
            model.default_reg_tokens.set(profile.default_token_ids)
        return self._profile_to_domain(model)

    @sync_to_async
    def find_profile_by_id(self, profile_id: int) -> Optional[KickstartData]:
        try:
            # pylint: disable=no-member
            model = KickstartDataModel.objects.get(id=profile_id)
            return self._profile_to_domain(model)
        except KickstartDataModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_profiles_by_default_token(self, token_id: int) -> List[KickstartData]:
        models = KickstartDataModel.objects.filter(  # pylint: disable=no-member
            default_reg_tokens__id=token_id
        ).distinct()
        return [self._profile_to_domain(model) for model in models]

    @sync_to_async
    def save_session(self, session: KickstartSession) -> KickstartSession:
        if session.id is None:
            model = KickstartSessionModel()
        else:
            # pylint: disable=no-member
            model = KickstartSessionModel.objects.get(id=session.id)
        model.kickstart_data_id = session.kickstart_data_id
        model.org_id = session.org_id
        model.server_id = session.server_id
        model.save()
        return self._session_to_domain(model)

    @sync_to_async
    def find_session_by_id(self, session_id: int) -> Optional[KickstartSession]:
        try:
            # pylint: disable=no-member
            model = KickstartSessionModel.objects.get(id=session_id)
            return self._session_to_domain(model)
        except KickstartSessionModel.DoesNotExist:  # pylint: disable=no-member
            return None
