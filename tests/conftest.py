"""
Pytest configuration and shared fixtures.

Unit tests drive the registry through the in-memory adapters below;
integration tests use the Django repositories against the test database.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional

import pytest

from core.domain.exceptions import ActivationKeyExistsError, OrgNotFoundError
from core.domain.events import EventHandler
from core.domain.value_objects import ServerGroupType
from core.infrastructure.cache import CachePort
from core.infrastructure.events import event_bus
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
from tokens.application.services.activation_key_cache_service import ActivationKeyCacheService
from tokens.application.services.activation_key_registry import ActivationKeyRegistry
from tokens.domain.activation_key import ActivationKey, Token
from tokens.domain.events import (
    ActivationKeyCreated,
    ActivationKeyRemoved,
    UniversalDefaultChanged,
)
from tokens.infrastructure.repositories.django_activation_key_repository import (
    DjangoActivationKeyRepository,
)
from tokens.infrastructure.repositories.django_token_repository import DjangoTokenRepository
from tokens.ports.activation_key_repository import ActivationKeyRepository
from tokens.ports.token_repository import TokenRepository

ENTERPRISE = ServerGroupType.enterprise_entitled()
BOOTSTRAP = ServerGroupType(label="bootstrap_entitled", name="Bootstrap")
VIRTUALIZATION = ServerGroupType(label="virtualization_host", name="Virtualization Host")


# In-memory adapters


class InMemoryActivationKeyRepository(ActivationKeyRepository):
    """ActivationKeyRepository keeping keys in a dict."""

    def __init__(self, org_repository: Optional["InMemoryOrgRepository"] = None):
        self.keys: Dict[int, ActivationKey] = {}
        self.org_repository = org_repository
        self.save_calls = 0
        self._next_key_id = 1
        self._next_token_id = 1

    async def save(self, activation_key: ActivationKey) -> ActivationKey:
        self.save_calls += 1
        clash = await self.find_by_key(activation_key.key)
        if clash is not None and clash.id != activation_key.id:
            raise ActivationKeyExistsError(activation_key.key)
        token = activation_key.token
        if token.id is None:
            token = replace(token, id=self._next_token_id)
            self._next_token_id += 1
        key_id = activation_key.id
        if key_id is None:
            key_id = self._next_key_id
            self._next_key_id += 1
        saved = replace(activation_key, id=key_id, token=token)
        self.keys[key_id] = saved
        return saved

    async def save_as_universal_default(self, activation_key: ActivationKey) -> ActivationKey:
        org = None
        if self.org_repository is not None:
            org = await self.org_repository.find_by_id(activation_key.org_id)
        if org is None:
            raise OrgNotFoundError(f"Organization {activation_key.org_id} not found")
        saved = await self.save(activation_key)
        await self.org_repository.save(org.set_universal_default(saved.token.id))
        return saved

    def replace_token(self, token: Token) -> None:
        for key_id, activation_key in list(self.keys.items()):
            if activation_key.token.id == token.id:
                self.keys[key_id] = replace(activation_key, token=token)

    def _ordered(self) -> List[ActivationKey]:
        return [self.keys[key_id] for key_id in sorted(self.keys)]

    async def find_by_key(self, key: str) -> Optional[ActivationKey]:
        return next((k for k in self._ordered() if k.key == key), None)

    async def exists(self, key: str) -> bool:
        return any(k.key == key for k in self.keys.values())

    async def find_root_by_token_id(self, token_id: int) -> Optional[ActivationKey]:
        return next(
            (
                k
                for k in self._ordered()
                if k.token.id == token_id and k.kickstart_session_id is None
            ),
            None,
        )

    async def find_by_kickstart_session(self, session_id: int) -> Optional[ActivationKey]:
        return next(
            (k for k in self._ordered() if k.kickstart_session_id == session_id), None
        )

    async def find_by_token_id(self, token_id: int) -> List[ActivationKey]:
        return [k for k in self._ordered() if k.token.id == token_id]

    async def find_by_server(self, server_id: int) -> List[ActivationKey]:
        return [k for k in self._ordered() if k.server_id == server_id]

    async def find_by_activated_server(self, server_id: int) -> List[ActivationKey]:
        return [k for k in self._ordered() if server_id in k.token.activated_server_ids]

    def _delete_tokens(self, token_ids) -> int:
        doomed = [key_id for key_id, k in self.keys.items() if k.token.id in token_ids]
        for key_id in doomed:
            del self.keys[key_id]
        return len(doomed)

    async def delete_by_server(self, server_id: int) -> int:
        token_ids = {k.token.id for k in self.keys.values() if k.server_id == server_id}
        return self._delete_tokens(token_ids)

    async def delete_by_key(self, key: str) -> int:
        token_ids = {k.token.id for k in self.keys.values() if k.key == key}
        return self._delete_tokens(token_ids)


class InMemoryTokenRepository(TokenRepository):
    """TokenRepository reading the tokens held by an in-memory key repository."""

    def __init__(self, activation_key_repository: InMemoryActivationKeyRepository):
        self.activation_key_repository = activation_key_repository

    def _find(self, token_id: int) -> Optional[Token]:
        for activation_key in self.activation_key_repository.keys.values():
            if activation_key.token.id == token_id:
                return activation_key.token
        return None

    async def find_by_id(self, token_id: int, org_id: int) -> Optional[Token]:
        token = self._find(token_id)
        if token is None or token.org_id != org_id:
            return None
        return token

    async def record_activation(self, token_id: int, server_id: int) -> None:
        token = self._find(token_id)
        if token is None or server_id in token.activated_server_ids:
            return
        self.activation_key_repository.replace_token(
            replace(token, activated_server_ids=token.activated_server_ids + (server_id,))
        )


class InMemoryOrgRepository(OrgRepository):
    """OrgRepository keeping orgs in a dict."""

    def __init__(self):
        self.orgs: Dict[int, Org] = {}
        self.save_calls = 0

    def add(self, org: Org) -> Org:
        self.orgs[org.id] = org
        return org

    async def save(self, org: Org) -> Org:
        self.save_calls += 1
        if org.id is None:
            org = replace(org, id=max(self.orgs, default=0) + 1)
        self.orgs[org.id] = org
        return org

    async def find_by_id(self, org_id: int) -> Optional[Org]:
        return self.orgs.get(org_id)


class InMemoryKickstartRepository(KickstartRepository):
    """KickstartRepository keeping profiles and sessions in dicts."""

    def __init__(self):
        self.profiles: Dict[int, KickstartData] = {}
        self.sessions: Dict[int, KickstartSession] = {}

    async def save_profile(self, profile: KickstartData) -> KickstartData:
        if profile.id is None:
            profile = replace(profile, id=max(self.profiles, default=0) + 1)
        self.profiles[profile.id] = profile
        return profile

    async def find_profile_by_id(self, profile_id: int) -> Optional[KickstartData]:
        return self.profiles.get(profile_id)

    async def find_profiles_by_default_token(self, token_id: int) -> List[KickstartData]:
        return [p for p in self.profiles.values() if token_id in p.default_token_ids]

    async def save_session(self, session: KickstartSession) -> KickstartSession:
        if session.id is None:
            session = replace(session, id=max(self.sessions, default=0) + 1)
        self.sessions[session.id] = session
        return session

    async def find_session_by_id(self, session_id: int) -> Optional[KickstartSession]:
        return self.sessions.get(session_id)


class InMemoryCache(CachePort):
    """CachePort backed by a dict, recording reads."""

    def __init__(self):
        self.data: Dict[str, Any] = {}
        self.gets: List[str] = []

    async def get(self, key: str) -> Optional[Any]:
        self.gets.append(key)
        return self.data.get(key)

    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)

    async def delete_many(self, keys) -> None:
        for key in keys:
            self.data.pop(key, None)


class RecordingEventHandler(EventHandler):
    """Collects published events."""

    def __init__(self):
        self.events = []

    async def handle(self, event) -> None:
        self.events.append(event)


# Unit fixtures


@pytest.fixture
def memory_key_repository(memory_org_repository):
    """Fixture for an in-memory ActivationKeyRepository."""
    return InMemoryActivationKeyRepository(memory_org_repository)


@pytest.fixture
def memory_token_repository(memory_key_repository):
    """Fixture for an in-memory TokenRepository."""
    return InMemoryTokenRepository(memory_key_repository)


@pytest.fixture
def memory_org_repository():
    """Fixture for an in-memory OrgRepository."""
    return InMemoryOrgRepository()


@pytest.fixture
def memory_kickstart_repository():
    """Fixture for an in-memory KickstartRepository."""
    return InMemoryKickstartRepository()


@pytest.fixture
def memory_cache():
    """Fixture for an in-memory cache."""
    return InMemoryCache()


@pytest.fixture
def registry(
    memory_key_repository,
    memory_token_repository,
    memory_org_repository,
    memory_kickstart_repository,
    memory_cache,
):
    """Fixture for an ActivationKeyRegistry wired to in-memory adapters."""
    return ActivationKeyRegistry(
        activation_key_repository=memory_key_repository,
        token_repository=memory_token_repository,
        org_repository=memory_org_repository,
        kickstart_repository=memory_kickstart_repository,
        cache_service=ActivationKeyCacheService(memory_cache),
    )


@pytest.fixture
def org(memory_org_repository):
    """Fixture for an org stored in the in-memory repository."""
    return memory_org_repository.add(Org(id=1, name="Acme"))


@pytest.fixture
def user(org):
    """Fixture for a user of the sample org."""
    return User(id=10, login="admin", org_id=org.id)


@pytest.fixture
def server(org):
    """Fixture for a non-bootstrap server with two entitlements."""
    return Server(
        id=100,
        org_id=org.id,
        name="web01.example.com",
        entitled_group_types=(ENTERPRISE, VIRTUALIZATION),
    )


@pytest.fixture
def bootstrap_server(org):
    """Fixture for a bootstrap-only server."""
    return Server(
        id=101,
        org_id=org.id,
        name="new01.example.com",
        entitled_group_types=(BOOTSTRAP, VIRTUALIZATION),
    )


@pytest.fixture
def base_channel(org):
    """Fixture for a base channel."""
    return Channel(id=5, label="sles15-sp5-pool-x86_64", name="SLES 15 SP5 Pool", org_id=org.id)


@pytest.fixture
def captured_events():
    """Record activation key events published on the global event bus."""
    handler = RecordingEventHandler()
    event_types = (ActivationKeyCreated, ActivationKeyRemoved, UniversalDefaultChanged)
    for event_type in event_types:
        event_bus.subscribe(event_type, handler)
    yield handler.events
    for event_type in event_types:
        event_bus.unsubscribe(event_type, handler)


# Integration fixtures


@pytest.fixture
def activation_key_repository():
    """Fixture for ActivationKeyRepository."""
    return DjangoActivationKeyRepository()


@pytest.fixture
def token_repository():
    """Fixture for TokenRepository."""
    return DjangoTokenRepository()


@pytest.fixture
def org_repository():
    """Fixture for OrgRepository."""
    return DjangoOrgRepository()


@pytest.fixture
def kickstart_repository():
    """Fixture for KickstartRepository."""
    return DjangoKickstartRepository()


@pytest.fixture
def db_org(db):
    """Fixture for an Org saved in database."""
    from organizations.infrastructure.models import Org as OrgModel

    model = OrgModel.objects.create(name="Acme")
    return Org(id=model.id, name=model.name)


@pytest.fixture
def db_user(db, db_org):
    """Fixture for a User saved in database."""
    from organizations.infrastructure.models import OrgUser

    model = OrgUser.objects.create(org_id=db_org.id, login="admin")
    return User(id=model.id, login=model.login, org_id=db_org.id)


@pytest.fixture
def db_server(db, db_org):
    """Fixture for a non-bootstrap Server saved in database."""
    from servers.infrastructure.models import Server as ServerModel
    from servers.infrastructure.models import ServerGroupType as ServerGroupTypeModel

    model = ServerModel.objects.create(org_id=db_org.id, name="web01.example.com")
    for group_type in (ENTERPRISE, VIRTUALIZATION):
        row, _ = ServerGroupTypeModel.objects.get_or_create(
            label=group_type.label, defaults={"name": group_type.name}
        )
        model.entitlements.add(row)
    return Server(
        id=model.id,
        org_id=db_org.id,
        name=model.name,
        entitled_group_types=(ENTERPRISE, VIRTUALIZATION),
    )


@pytest.fixture
def db_channel(db, db_org):
    """Fixture for a base Channel saved in database."""
    from servers.infrastructure.models import Channel as ChannelModel

    model = ChannelModel.objects.create(
        org_id=db_org.id, label="sles15-sp5-pool-x86_64", name="SLES 15 SP5 Pool"
    )
    return Channel(id=model.id, label=model.label, name=model.name, org_id=db_org.id)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
