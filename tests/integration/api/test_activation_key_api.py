"""
Integration tests for Activation Key API endpoints.
"""

import pytest
from django.urls import reverse

from kickstart.infrastructure.models import KickstartData as KickstartDataModel
from organizations.infrastructure.models import Org as OrgModel
from tokens.infrastructure.models import ActivationKey as ActivationKeyModel


@pytest.mark.django_db
@pytest.mark.integration
class TestActivationKeyAPI:
    """Integration tests for Activation Key API."""

    def test_create_generated_key(self, api_client, db_user):
        url = reverse("activation_keys:create-activation-key")
        response = api_client.post(url, {"user_id": db_user.id}, format="json")

        assert response.status_code == 201
        data = response.json()
        assert len(data["key"]) == 32
        assert data["note"] == "None"
        assert data["org_id"] == db_user.org_id
        assert data["entitlements"] == ["enterprise_entitled"]
        assert data["contact_method"] == "default"
        assert data["universal_default"] is False
        assert ActivationKeyModel.objects.filter(key=data["key"]).exists()

    def test_create_server_key(self, api_client, db_user, db_server, db_channel):
        url = reverse("activation_keys:create-activation-key")
        response = api_client.post(
            url,
            {
                "user_id": db_user.id,
                "server_id": db_server.id,
                "key": "my key",
                "note": "  <web> ",
                "usage_limit": 5,
                "base_channel_id": db_channel.id,
                "universal_default": True,
            },
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["key"] == "re-mykey"
        assert data["note"] == "&lt;web&gt;"
        assert data["usage_limit"] == 5
        assert data["server_id"] == db_server.id
        assert data["base_channel_id"] == db_channel.id
        assert sorted(data["entitlements"]) == ["enterprise_entitled", "virtualization_host"]
        assert data["universal_default"] is True
        assert OrgModel.objects.get(id=db_user.org_id).default_token_id == data["token_id"]

    def test_create_invalid_characters(self, api_client, db_user):
        url = reverse("activation_keys:create-activation-key")
        response = api_client.post(
            url, {"user_id": db_user.id, "key": 'bad,"key'}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ACTIVATION_KEY_INVALID_CHARS"
        assert not ActivationKeyModel.objects.exists()

    def test_create_duplicate_key(self, api_client, db_user):
        url = reverse("activation_keys:create-activation-key")
        first = api_client.post(url, {"user_id": db_user.id, "key": "dup"}, format="json")
        second = api_client.post(url, {"user_id": db_user.id, "key": "dup"}, format="json")

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["error"]["code"] == "ACTIVATION_KEY_EXISTS"
        assert ActivationKeyModel.objects.filter(key="dup").count() == 1

    def test_create_duplicate_server_key(self, api_client, db_user, db_server):
        url = reverse("activation_keys:create-activation-key")
        payload = {"user_id": db_user.id, "key": "dup", "server_id": db_server.id}
        first = api_client.post(url, payload, format="json")
        second = api_client.post(url, payload, format="json")

        assert first.status_code == 201
        assert first.json()["key"] == "re-dup"
        assert second.status_code == 400
        assert second.json()["error"]["code"] == "ACTIVATION_KEY_EXISTS"
        assert ActivationKeyModel.objects.filter(key="re-dup").count() == 1

    def test_create_unknown_user(self, api_client, db_org):
        url = reverse("activation_keys:create-activation-key")
        response = api_client.post(url, {"user_id": 999999}, format="json")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    def test_create_missing_user_id(self, api_client):
        url = reverse("activation_keys:create-activation-key")
        response = api_client.post(url, {}, format="json")

        assert response.status_code == 400
        assert "user_id" in response.json()["error"]

    def test_get_key(self, api_client, db_user):
        create_url = reverse("activation_keys:create-activation-key")
        api_client.post(create_url, {"user_id": db_user.id, "key": "lookup"}, format="json")

        response = api_client.get(reverse("activation_keys:activation-key-detail", args=["lookup"]))

        assert response.status_code == 200
        assert response.json()["key"] == "lookup"

    def test_get_unknown_key_returns_fault(self, api_client, db_org):
        response = api_client.get(
            reverse("activation_keys:activation-key-detail", args=["missing"])
        )

        assert response.status_code == 404
        fault = response.json()["fault"]
        assert fault["code"] == 11000
        assert fault["label"] == "invalidToken"
        assert "missing" in fault["message"]

    def test_delete_key(self, api_client, db_user):
        create_url = reverse("activation_keys:create-activation-key")
        api_client.post(create_url, {"user_id": db_user.id, "key": "gone"}, format="json")
        url = reverse("activation_keys:activation-key-detail", args=["gone"])

        first = api_client.delete(url)
        second = api_client.delete(url)

        assert first.status_code == 204
        assert second.status_code == 404
        assert second.json()["fault"]["code"] == 11000

    def test_list_kickstarts(self, api_client, db_user):
        create_url = reverse("activation_keys:create-activation-key")
        created = api_client.post(
            create_url, {"user_id": db_user.id, "key": "ks"}, format="json"
        ).json()
        profile = KickstartDataModel.objects.create(org_id=db_user.org_id, label="sles15-web")
        profile.default_reg_tokens.add(created["token_id"])
        KickstartDataModel.objects.create(org_id=db_user.org_id, label="sles15-db")

        response = api_client.get(
            reverse("activation_keys:activation-key-kickstarts", args=["ks"])
        )

        assert response.status_code == 200
        assert [item["label"] for item in response.json()] == ["sles15-web"]


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Integration tests for health endpoints."""

    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "activation-key-service"}

    def test_health_db(self, client):
        response = client.get(reverse("health-db"))

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": True}

    def test_ready(self, client):
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["checks"] == {
            "database": True,
            "cache": True,
            "activation_keys": True,
        }
