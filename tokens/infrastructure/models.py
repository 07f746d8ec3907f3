"""
Token and ActivationKey Django ORM models.

Domain entities are in tokens.domain.activation_key.
"""
from django.db import models
from django.db.models import Q


class Token(models.Model):
    """
    Registration token carrying the settings applied by an activation key.
    """

    org = models.ForeignKey(
        "organizations.Org", on_delete=models.CASCADE, related_name="tokens"
    )
    creator = models.ForeignKey(
        "organizations.OrgUser",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="created_tokens",
    )
    server = models.ForeignKey(
        "servers.Server",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="bound_tokens",
    )
    note = models.CharField(max_length=2048, default="None")
    usage_limit = models.PositiveIntegerField(null=True, blank=True)
    disabled = models.BooleanField(default=False)
    deploy_configs = models.BooleanField(default=False)
    base_channel = models.ForeignKey(
        "servers.Channel",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="+",
    )
    channels = models.ManyToManyField(
        "servers.Channel",
        blank=True,
        related_name="tokens",
        db_table="token_channels",
    )
    entitlements = models.ManyToManyField(
        "servers.ServerGroupType",
        blank=True,
        related_name="tokens",
        db_table="token_entitlements",
    )
    contact_method = models.ForeignKey(
        "servers.ContactMethod", on_delete=models.PROTECT, related_name="tokens"
    )
    activated_servers = models.ManyToManyField(
        "servers.Server",
        blank=True,
        related_name="activation_tokens",
        db_table="server_token_registrations",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "tokens"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["org", "server"]),
        ]

    def __str__(self):
        return f"Token {self.id} ({self.note})"


class ActivationKey(models.Model):
    """
    Activation key model.

    Every token has at most one key without a kickstart session (its root
    key); per-session derivative keys share the token.
    """

    key = models.CharField(max_length=128, unique=True, db_index=True)
    token = models.ForeignKey(
        Token, on_delete=models.CASCADE, related_name="activation_keys"
    )
    kickstart_session = models.ForeignKey(
        "kickstart.KickstartSession",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="activation_keys",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "activation_keys"
        ordering = ["key"]
        constraints = [
            models.UniqueConstraint(
                fields=["token"],
                condition=Q(kickstart_session__isnull=True),
                name="uniq_root_activation_key_per_token",
            ),
        ]

    def __str__(self):
        return self.key
