"""
Org and User Django ORM models.

Domain entities are in organizations.domain.
"""
from django.db import models


class Org(models.Model):
    """
    An organization (tenant).

    default_token is the org's universal default activation key token.
    """

    name = models.CharField(max_length=128, unique=True)
    default_token = models.ForeignKey(
        "tokens.Token",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="+",
        help_text="Universal default activation key token",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orgs"
        ordering = ["id"]

    def __str__(self):
        return self.name


class OrgUser(models.Model):
    """A user belonging to an organization."""

    org = models.ForeignKey(Org, on_delete=models.CASCADE, related_name="users")
    login = models.CharField(max_length=64, unique=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "org_users"
        ordering = ["login"]

    def __str__(self):
        return self.login
