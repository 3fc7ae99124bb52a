"""
Persisted HSTS policy.

A single row holds the operator's configuration; ``DatabaseBackend`` reads and
writes it and the admin edits it through the policy store.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from .validators import MAX_AGE_DIGITS, validate_max_age


class HstsPolicyRecord(models.Model):
    """Stored form of the HSTS policy. Only one row ever exists."""

    SINGLETON_KEY = "default"

    singleton_key = models.CharField(
        max_length=32,
        unique=True,
        default=SINGLETON_KEY,
        editable=False,
    )
    send_header = models.BooleanField(
        default=True,
        help_text=_("Whether to send the Strict-Transport-Security header"),
    )
    max_age = models.CharField(
        max_length=MAX_AGE_DIGITS,
        default="31536000",
        validators=[validate_max_age],
        help_text=_("Seconds the browser must treat this host as HTTPS-only"),
    )
    include_subdomains = models.BooleanField(
        default=True,
        help_text=_("Apply the policy to every subdomain of this host"),
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("HSTS Policy")
        verbose_name_plural = _("HSTS Policy")

    def __str__(self):
        return f"HSTS policy (max-age={self.max_age})"

    def to_document(self):
        return {
            "sendHeader": self.send_header,
            "maxAge": self.max_age,
            "includeSubDomains": self.include_subdomains,
        }
