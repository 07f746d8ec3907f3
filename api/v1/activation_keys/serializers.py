"""
Serializers for activation key API endpoints.
"""

from rest_framework import serializers


class CreateActivationKeyRequestSerializer(serializers.Serializer):
    """Serializer for create activation key request."""

    user_id = serializers.IntegerField(required=True)
    server_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    key = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default="", max_length=64
    )
    note = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=None, max_length=2048
    )
    usage_limit = serializers.IntegerField(
        required=False, allow_null=True, default=0, min_value=0
    )
    base_channel_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    universal_default = serializers.BooleanField(required=False, default=False)


class ActivationKeyDTOSerializer(serializers.Serializer):
    """Serializer for ActivationKeyDTO."""

    key = serializers.CharField()
    token_id = serializers.IntegerField()
    org_id = serializers.IntegerField()
    note = serializers.CharField()
    usage_limit = serializers.IntegerField(allow_null=True)
    disabled = serializers.BooleanField()
    deploy_configs = serializers.BooleanField()
    server_id = serializers.IntegerField(allow_null=True)
    base_channel_id = serializers.IntegerField(allow_null=True)
    channel_ids = serializers.ListField(child=serializers.IntegerField())
    entitlements = serializers.ListField(child=serializers.CharField())
    contact_method = serializers.CharField()
    kickstart_session_id = serializers.IntegerField(allow_null=True)
    universal_default = serializers.BooleanField()
    created_at = serializers.DateTimeField(allow_null=True)


class KickstartProfileDTOSerializer(serializers.Serializer):
    """Serializer for KickstartProfileDTO."""

    id = serializers.IntegerField()
    label = serializers.CharField()
    org_id = serializers.IntegerField()
    active = serializers.BooleanField()


class RemoveActivationKeysResponseSerializer(serializers.Serializer):
    """Serializer for bulk removal response."""

    removed = serializers.IntegerField()
