"""
Django admin configuration for kickstart app.
"""
from django.contrib import admin

from kickstart.infrastructure.models import KickstartData, KickstartSession


@admin.register(KickstartData)
class KickstartDataAdmin(admin.ModelAdmin):
    """Admin interface for KickstartData model."""

    list_display = ["label", "org", "active", "created_at"]
    list_filter = ["active", "org"]
    search_fields = ["label", "org__name"]
    filter_horizontal = ["default_reg_tokens"]


@admin.register(KickstartSession)
class KickstartSessionAdmin(admin.ModelAdmin):
    """Admin interface for KickstartSession model."""

    list_display = ["id", "kickstart_data", "org", "server", "created_at"]
    list_filter = ["org"]
    readonly_fields = ["created_at"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("kickstart_data", "org", "server")
