"""
Django admin configuration for tokens app.
"""
from django.contrib import admin

from tokens.infrastructure.models import ActivationKey, Token


@admin.register(Token)
class TokenAdmin(admin.ModelAdmin):
    """Admin interface for Token model."""

    list_display = ["id", "org", "note", "usage_limit", "disabled", "server", "created_at"]
    list_filter = ["disabled", "deploy_configs", "created_at"]
    search_fields = ["note"]
    filter_horizontal = ["channels", "entitlements"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(ActivationKey)
class ActivationKeyAdmin(admin.ModelAdmin):
    """Admin interface for ActivationKey model."""

    list_display = ["key", "token", "kickstart_session", "created_at"]
    search_fields = ["key"]
    readonly_fields = ["created_at", "updated_at"]
