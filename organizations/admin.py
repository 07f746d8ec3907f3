"""
Django admin configuration for organizations app.
"""
from django.contrib import admin

from organizations.infrastructure.models import Org, OrgUser


@admin.register(Org)
class OrgAdmin(admin.ModelAdmin):
    """Admin interface for Org model."""

    list_display = ["name", "default_token", "user_count", "created_at"]
    search_fields = ["name"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def user_count(self, obj):
        """Display number of users in this org."""
        return obj.users.count()

    user_count.short_description = "Users"


@admin.register(OrgUser)
class OrgUserAdmin(admin.ModelAdmin):
    """Admin interface for OrgUser model."""

    list_display = ["login", "org", "created_at"]
    list_filter = ["org"]
    search_fields = ["login", "org__name"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("org")
