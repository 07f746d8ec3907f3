"""
Django admin configuration for servers app.
"""
from django.contrib import admin

from servers.infrastructure.models import Channel, ContactMethod, Server, ServerGroupType


@admin.register(Server)
class ServerAdmin(admin.ModelAdmin):
    """Admin interface for Server model."""

    list_display = ["name", "org", "entitlement_labels", "created_at"]
    list_filter = ["org", "entitlements"]
    search_fields = ["name", "org__name"]
    readonly_fields = ["id", "created_at"]

    def entitlement_labels(self, obj):
        """Display the server's entitlements."""
        return ", ".join(group_type.label for group_type in obj.entitlements.all())

    entitlement_labels.short_description = "Entitlements"

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super().get_queryset(request).select_related("org").prefetch_related("entitlements")
        )


@admin.register(Channel)
class ChannelAdmin(admin.ModelAdmin):
    """Admin interface for Channel model."""

    list_display = ["label", "name", "parent", "org"]
    list_filter = ["org"]
    search_fields = ["label", "name"]


@admin.register(ServerGroupType)
class ServerGroupTypeAdmin(admin.ModelAdmin):
    """Admin interface for ServerGroupType model."""

    list_display = ["label", "name"]
    search_fields = ["label", "name"]


@admin.register(ContactMethod)
class ContactMethodAdmin(admin.ModelAdmin):
    """Admin interface for ContactMethod model."""

    list_display = ["id", "label"]
