"""
Django implementation of ChannelRepository port.
"""
from typing import List, Optional

from asgiref.sync import sync_to_async

from servers.domain.channel import Channel
from servers.infrastructure.models import Channel as ChannelModel
from servers.ports.channel_repository import ChannelRepository


class DjangoChannelRepository(ChannelRepository):
    """Django ORM implementation of ChannelRepository."""

    def _to_domain(self, model: ChannelModel) -> Channel:
        return Channel(
            id=model.id,
            label=model.label,
            name=model.name,
            org_id=model.org_id,
            parent_id=model.parent_id,
        )

    @sync_to_async
    def save(self, channel: Channel) -> Channel:
        if channel.id is None:
            model = ChannelModel()
        else:
            model = ChannelModel.objects.get(id=channel.id)  # pylint: disable=no-member
        model.label = channel.label
        model.name = channel.name
        model.org_id = channel.org_id
        model.parent_id = channel.parent_id
        model.save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, channel_id: int) -> Optional[Channel]:
        try:
            model = ChannelModel.objects.get(id=channel_id)  # pylint: disable=no-member
            return self._to_domain(model)
        except ChannelModel.DoesNotExist:  # pylint: disable=no-member
            return None

    @sync_to_async
    def find_by_ids(self, channel_ids: List[int]) -> List[Channel]:
        models = ChannelModel.objects.filter(id__in=channel_ids)  # pylint: disable=no-member
        return [self._to_domain(model) for model in models]
