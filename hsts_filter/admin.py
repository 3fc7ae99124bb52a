"""Admin interface for the HSTS policy."""

from django import forms
from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from .backends.database import DatabaseBackend
from .exceptions import ConfigPersistenceError
from .forms import HstsPolicyForm
from .models import HstsPolicyRecord
from .registry import get_policy_store


class HstsPolicyRecordAdminForm(forms.ModelForm):
    """Validate the row exactly as the policy store will."""

    class Meta:
        model = HstsPolicyRecord
        fields = ["send_header", "max_age", "include_subdomains"]

    def clean(self):
        cleaned_data = super().clean()
        if "max_age" in self.errors:
            return cleaned_data

        policy_form = HstsPolicyForm(
            data={
                "sendHeader": cleaned_data.get("send_header"),
                "maxAge": cleaned_data.get("max_age"),
                "includeSubDomains": cleaned_data.get("include_subdomains"),
            }
        )
        if not policy_form.is_valid():
            for message in policy_form.errors.get("maxAge", []):
                self.add_error("max_age", message)
        return cleaned_data


@admin.register(HstsPolicyRecord)
class HstsPolicyRecordAdmin(admin.ModelAdmin):
    """
    Edit the single HSTS policy row.

    Saving goes through the policy store so the change takes effect
    immediately instead of on the next restart.
    """

    form = HstsPolicyRecordAdminForm

    list_display = [
        'send_header',
        'max_age',
        'include_subdomains',
        'header_preview',
        'updated_at',
    ]
    readonly_fields = [
        'header_preview',
        'updated_at',
    ]

    def header_preview(self, obj):
        """Header value the current store would emit."""
        policy = get_policy_store().current()
        if not policy.send_header:
            return _("(not sent)")
        return policy.header_value() or _("(invalid max-age, not sent)")
    header_preview.short_description = _('Emitted header')

    def save_model(self, request, obj, form, change):
        store = get_policy_store()
        # Validation already ran in HstsPolicyRecordAdminForm
        try:
            store.configure(obj.to_document())
        except ConfigPersistenceError:
            self.message_user(
                request,
                _("The HSTS policy is active but could not be saved; it will be lost on restart."),
                messages.WARNING,
            )

        obj.max_age = str(store.current().max_age)
        if isinstance(store.backend, DatabaseBackend):
            # The backend already wrote the row
            record = HstsPolicyRecord.objects.filter(
                singleton_key=HstsPolicyRecord.SINGLETON_KEY
            ).first()
            if record is not None:
                obj.pk = record.pk
                obj.updated_at = record.updated_at
                return
        super().save_model(request, obj, form, change)

    def has_add_permission(self, request):
        """Allow a single policy row."""
        if HstsPolicyRecord.objects.exists():
            return False
        return super().has_add_permission(request)

    def has_delete_permission(self, request, obj=None):
        """The policy can be disabled but not deleted."""
        return False
