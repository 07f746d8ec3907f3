"""
Server, Channel, ServerGroupType and ContactMethod Django ORM models.

Domain entities are in servers.domain and core.domain.value_objects.
"""
from django.db import models


class ServerGroupType(models.Model):
    """An entitlement a server or activation key can carry."""

    label = models.CharField(max_length=64, unique=True, db_index=True)
    name = models.CharField(max_length=128, blank=True, default="")

    class Meta:
        db_table = "server_group_types"
        ordering = ["label"]

    def __str__(self):
        return self.label


class ContactMethod(models.Model):
    """How the management server reaches a registered server."""

    id = models.IntegerField(primary_key=True)
    label = models.CharField(max_length=64, unique=True)

    class Meta:
        db_table = "server_contact_methods"
        ordering = ["id"]

    def __str__(self):
        return self.label


class Channel(models.Model):
    """A software channel. Channels without a parent are base channels."""

    org = models.ForeignKey(
        "organizations.Org",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="channels",
    )
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="children",
    )
    label = models.CharField(max_length=128, unique=True, db_index=True)
    name = models.CharField(max_length=256)

    class Meta:
        db_table = "channels"
        ordering = ["label"]

    def __str__(self):
        return self.label


class Server(models.Model):
    """A managed server."""

    org = models.ForeignKey(
        "organizations.Org", on_delete=models.CASCADE, related_name="servers"
    )
    name = models.CharField(max_length=128)
    entitlements = models.ManyToManyField(
        ServerGroupType,
        blank=True,
        related_name="servers",
        db_table="server_entitlements",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "servers"
        ordering = ["id"]

    def __str__(self):
        return self.name
