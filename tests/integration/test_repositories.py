"""
Integration tests for repository implementations.
"""

import pytest

from core.domain.exceptions import ActivationKeyExistsError, OrgNotFoundError
from core.domain.value_objects import ServerGroupType
from kickstart.domain.kickstart import KickstartData, KickstartSession
from tokens.domain.activation_key import ActivationKey, Token

ENTERPRISE = ServerGroupType.enterprise_entitled()


def _key(org_id, key, **token_fields):
    token = Token.create(org_id=org_id, **token_fields).add_entitlement(ENTERPRISE)
    return ActivationKey.create(key=key, token=token)


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestActivationKeyRepository:
    """Integration tests for ActivationKeyRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, activation_key_repository, db_user, db_server, db_channel):
        """Key, token, channels and entitlements are saved together."""
        token = (
            Token.create(
                org_id=db_user.org_id,
                creator_id=db_user.id,
                server_id=db_server.id,
                note="web",
                usage_limit=3,
            )
            .set_base_channel(db_channel.id)
            .add_entitlements(db_server.entitled_group_types)
        )

        saved = await activation_key_repository.save(
            ActivationKey.create(key="re-web", token=token)
        )

        assert saved.id is not None
        assert saved.token.id is not None

        found = await activation_key_repository.find_by_key("re-web")
        assert found is not None
        assert found.note == "web"
        assert found.usage_limit == 3
        assert found.server_id == db_server.id
        assert found.creator_id == db_user.id
        assert found.base_channel_id == db_channel.id
        assert found.channel_ids == (db_channel.id,)
        assert set(found.entitlements) == set(db_server.entitled_group_types)
        assert found.contact_method.id == 0
        assert found.disabled is False

    @pytest.mark.asyncio
    async def test_find_not_found(self, activation_key_repository, db_org):
        assert await activation_key_repository.find_by_key("missing") is None
        assert await activation_key_repository.exists("missing") is False

    @pytest.mark.asyncio
    async def test_duplicate_key_rejected_by_database(self, activation_key_repository, db_org):
        """A clash caught by the unique constraint is reported as an existing key."""
        await activation_key_repository.save(_key(db_org.id, "dup"))

        with pytest.raises(ActivationKeyExistsError) as exc_info:
            await activation_key_repository.save(_key(db_org.id, "dup"))

        assert exc_info.value.key == "dup"
        assert await activation_key_repository.exists("dup") is True

    @pytest.mark.asyncio
    async def test_save_as_universal_default(
        self, activation_key_repository, org_repository, db_org
    ):
        saved = await activation_key_repository.save_as_universal_default(
            _key(db_org.id, "org-default")
        )

        org = await org_repository.find_by_id(db_org.id)
        assert org.default_token_id == saved.token.id

    @pytest.mark.asyncio
    async def test_save_as_universal_default_unknown_org_writes_nothing(
        self, activation_key_repository, db_org
    ):
        with pytest.raises(OrgNotFoundError):
            await activation_key_repository.save_as_universal_default(
                _key(db_org.id + 1000, "orphan")
            )

        assert await activation_key_repository.exists("orphan") is False

    @pytest.mark.asyncio
    async def test_find_by_token_id(
        self, activation_key_repository, kickstart_repository, db_org
    ):
        root = await activation_key_repository.save(_key(db_org.id, "shared"))
        profile = await kickstart_repository.save_profile(
            KickstartData.create(org_id=db_org.id, label="sles15-shared")
        )
        session = await kickstart_repository.save_session(
            KickstartSession.create(profile.id, db_org.id)
        )
        await activation_key_repository.save(
            ActivationKey.create(key="ks-shared", token=root.token, kickstart_session_id=session.id)
        )
        await activation_key_repository.save(_key(db_org.id, "other"))

        found = await activation_key_repository.find_by_token_id(root.token.id)

        assert [k.key for k in found] == ["shared", "ks-shared"]
        assert found[1].kickstart_session_id == session.id

    @pytest.mark.asyncio
    async def test_root_and_session_keys(
        self, activation_key_repository, kickstart_repository, db_org, db_server
    ):
        root = await activation_key_repository.save(_key(db_org.id, "root"))
        profile = await kickstart_repository.save_profile(
            KickstartData.create(org_id=db_org.id, label="sles15-web")
        )
        session = await kickstart_repository.save_session(
            KickstartSession.create(profile.id, db_org.id, server_id=db_server.id)
        )
        derivative = await activation_key_repository.save(
            ActivationKey.create(key="ks-root", token=root.token, kickstart_session_id=session.id)
        )

        found_root = await activation_key_repository.find_root_by_token_id(root.token.id)
        found_session = await activation_key_repository.find_by_kickstart_session(session.id)

        assert found_root.key == "root"
        assert found_session.key == "ks-root"
        assert derivative.token.id == root.token.id

    @pytest.mark.asyncio
    async def test_find_by_server_and_delete(self, activation_key_repository, db_org, db_server):
        await activation_key_repository.save(_key(db_org.id, "re-one", server_id=db_server.id))
        await activation_key_repository.save(_key(db_org.id, "re-two", server_id=db_server.id))
        await activation_key_repository.save(_key(db_org.id, "unbound"))

        bound = await activation_key_repository.find_by_server(db_server.id)
        assert sorted(k.key for k in bound) == ["re-one", "re-two"]

        assert await activation_key_repository.delete_by_server(db_server.id) == 2
        assert await activation_key_repository.delete_by_server(db_server.id) == 0
        assert await activation_key_repository.exists("unbound") is True

    @pytest.mark.asyncio
    async def test_delete_by_key_clears_universal_default(
        self, activation_key_repository, org_repository, db_org
    ):
        saved = await activation_key_repository.save(_key(db_org.id, "default"))
        org = await org_repository.find_by_id(db_org.id)
        await org_repository.save(org.set_universal_default(saved.token.id))

        assert await activation_key_repository.delete_by_key("default") == 1
        assert await activation_key_repository.delete_by_key("default") == 0

        org = await org_repository.find_by_id(db_org.id)
        assert org.default_token_id is None

    @pytest.mark.asyncio
    async def test_activation_history(
        self, activation_key_repository, token_repository, db_org, db_server
    ):
        saved = await activation_key_repository.save(_key(db_org.id, "activator"))

        await token_repository.record_activation(saved.token.id, db_server.id)

        found = await activation_key_repository.find_by_activated_server(db_server.id)
        assert [k.key for k in found] == ["activator"]

        token = await token_repository.find_by_id(saved.token.id, db_org.id)
        assert token.activated_server_ids == (db_server.id,)
        assert await token_repository.find_by_id(saved.token.id, db_org.id + 1) is None


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestKickstartRepository:
    """Integration tests for KickstartRepository."""

    @pytest.mark.asyncio
    async def test_profiles_by_default_token(
        self, activation_key_repository, kickstart_repository, db_org
    ):
        saved = await activation_key_repository.save(_key(db_org.id, "ks-default"))
        profile = KickstartData.create(org_id=db_org.id, label="sles15-web")
        profile = await kickstart_repository.save_profile(
            profile.add_default_token(saved.token.id)
        )
        await kickstart_repository.save_profile(
            KickstartData.create(org_id=db_org.id, label="sles15-db")
        )

        profiles = await kickstart_repository.find_profiles_by_default_token(saved.token.id)

        assert [p.label for p in profiles] == ["sles15-web"]
        assert profiles[0].default_token_ids == (saved.token.id,)


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestActivationKeyRegistryWithDatabase:
    """End-to-end registry behavior against the Django repositories."""

    @pytest.mark.asyncio
    async def test_create_server_key_as_universal_default(
        self, db_user, db_server, db_channel, org_repository
    ):
        from tokens.application.services.activation_key_registry import activation_key_registry

        activation_key = await activation_key_registry.create_new_key(
            db_user,
            "",
            server=db_server,
            key="mykey",
            usage_limit=10,
            base_channel=db_channel,
            universal_default=True,
        )

        assert activation_key.key == "re-mykey"
        assert activation_key.note == "None"
        assert set(activation_key.entitlements) == set(db_server.entitled_group_types)
        assert db_channel.id in activation_key.channel_ids

        org = await org_repository.find_by_id(db_user.org_id)
        assert org.default_token_id == activation_key.token.id

        assert await activation_key_registry.remove_keys_for_server(db_server.id) == 1
        assert await activation_key_registry.remove_keys_for_server(db_server.id) == 0
