"""
Django implementation of UserRepository port.
"""
from typing import Optional

from asgiref.sync import sync_to_async

from organizations.domain.user import User
from organizations.infrastructure.models import OrgUser as OrgUserModel
from organizations.ports.user_repository import UserRepository


class DjangoUserRepository(UserRepository):
    """Django ORM implementation of UserRepository."""

    def _to_domain(self, model: OrgUserModel) -> User:
        return User(id=model.id, login=model.login, org_id=model.org_id)

    @sync_to_async
    def save(self, user: User) -> User:
        if user.id is None:
            model = OrgUserModel(login=user.login, org_id=user.org_id)
        else:
            model = OrgUserModel.objects.get(id=user.id)  # pylint: disable=no-member
            model.login = user.login
            model.org_id = user.org_id
        model.save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, user_id: int) -> Optional[User]:
        try:
            model = OrgUserModel.objects.get(id=user_id)  # pylint: disable=no-member
            return self._to_domain(model)
        except OrgUserModel.DoesNotExist:  # pylint: disable=no-member
            return None
