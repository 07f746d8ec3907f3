"""
KickstartData and KickstartSession Django ORM models.
"""
from django.db import models


class KickstartData(models.Model):
    """A provisioning profile."""

    org = models.ForeignKey(
        "organizations.Org", on_delete=models.CASCADE, related_name="kickstarts"
    )
    label = models.CharField(max_length=64)
    active = models.BooleanField(default=True)
    default_reg_tokens = models.ManyToManyField(
        "tokens.Token",
        blank=True,
        related_name="kickstarts",
        db_table="kickstart_default_reg_tokens",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "kickstart_data"
        ordering = ["label"]
        unique_together = [["org", "label"]]

    def __str__(self):
        return self.label


class KickstartSession(models.Model):
    """One provisioning run of a kickstart profile."""

    kickstart_data = models.ForeignKey(
        KickstartData, on_delete=models.CASCADE, related_name="sessions"
    )
    org = models.ForeignKey(
        "organizations.Org", on_delete=models.CASCADE, related_name="kickstart_sessions"
    )
    server = models.ForeignKey(
        "servers.Server",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="kickstart_sessions",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "kickstart_sessions"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.kickstart_data.label} #{self.id}"
