"""
Integration tests for the database schema of the local apps.
"""

import pytest
from django.apps import apps
from django.db import connection

LOCAL_APPS = ["organizations", "servers", "kickstart", "tokens"]

EXPECTED_TABLES = {
    "orgs",
    "org_users",
    "servers",
    "server_group_types",
    "server_contact_methods",
    "server_entitlements",
    "channels",
    "kickstart_data",
    "kickstart_sessions",
    "kickstart_default_reg_tokens",
    "tokens",
    "activation_keys",
    "token_channels",
    "token_entitlements",
    "server_token_registrations",
}


@pytest.mark.integration
class TestSchema:
    """The test database is built from the local apps' models."""

    @pytest.mark.parametrize("label", LOCAL_APPS)
    def test_app_exposes_models_module(self, label):
        app_config = apps.get_app_config(label)

        assert app_config.models_module is not None
        assert list(app_config.get_models())

    @pytest.mark.django_db
    def test_tables_created(self):
        tables = set(connection.introspection.table_names())

        assert EXPECTED_TABLES <= tables

    @pytest.mark.django_db
    def test_org_row_round_trip(self):
        from organizations.infrastructure.models import Org as OrgModel

        created = OrgModel.objects.create(name="Schema Org")

        assert OrgModel.objects.get(id=created.id).name == "Schema Org"
