"""
Unit tests for core value objects.
"""
import pytest

from core.domain.value_objects import ContactMethod, EntitlementLabel, ServerGroupType
from servers.domain.server import Server


class TestServerGroupType:
    """Tests for ServerGroupType value object."""

    def test_equality_by_label(self):
        """Group types compare by label only."""
        assert ServerGroupType(label="enterprise_entitled", id=1) == ServerGroupType(
            label="enterprise_entitled", name="Management"
        )
        assert len({ServerGroupType("a", id=1), ServerGroupType("a", id=2)}) == 1

    def test_empty_label(self):
        with pytest.raises(ValueError):
            ServerGroupType(label=" ")

    def test_enterprise_entitled(self):
        group_type = ServerGroupType.enterprise_entitled()

        assert group_type.label == EntitlementLabel.ENTERPRISE_ENTITLED.value
        assert group_type.is_bootstrap is False

    def test_bootstrap(self):
        assert ServerGroupType(label="bootstrap_entitled").is_bootstrap is True


class TestContactMethod:
    """Tests for ContactMethod value object."""

    def test_default(self):
        method = ContactMethod.default()

        assert method.id == 0
        assert str(method) == "default"

    def test_negative_id(self):
        with pytest.raises(ValueError):
            ContactMethod(id=-1, label="ssh-push")


class TestServerBootstrap:
    """Tests for bootstrap detection on servers."""

    def test_server_with_bootstrap_entitlement(self):
        server = Server.create(
            org_id=1, name="new01", entitlements=[ServerGroupType("bootstrap_entitled")]
        )

        assert server.is_bootstrap is True

    def test_server_without_bootstrap_entitlement(self):
        server = Server.create(
            org_id=1, name="web01", entitlements=[ServerGroupType.enterprise_entitled()]
        )

        assert server.is_bootstrap is False
