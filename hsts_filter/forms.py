"""
Forms for the HSTS policy configuration document.

Field names follow the configuration document (``sendHeader``, ``maxAge``,
``includeSubDomains``). Unchecked checkboxes are simply missing from a form
post, so absent booleans validate as False.
"""

from django import forms
from django.utils.translation import gettext_lazy as _

from .policy import Policy, coerce_bool, parse_max_age
from .validators import validate_max_age


class FormCheckboxInput(forms.CheckboxInput):
    def value_from_datadict(self, data, files, name):
        if name not in data:
            return False
        return coerce_bool(data.get(name))


class FormBooleanField(forms.BooleanField):
    """BooleanField that reads "off"/"no" as False instead of truthy text."""

    widget = FormCheckboxInput

    def to_python(self, value):
        return coerce_bool(value)


class HstsPolicyForm(forms.Form):
    sendHeader = FormBooleanField(
        required=False,
        label=_("Send Strict-Transport-Security header"),
    )
    maxAge = forms.CharField(
        strip=True,
        label=_("Max age (seconds)"),
        validators=[validate_max_age],
    )
    includeSubDomains = FormBooleanField(
        required=False,
        label=_("Include subdomains"),
    )

    def to_policy(self) -> Policy:
        data = self.cleaned_data
        return Policy(
            send_header=data["sendHeader"],
            max_age=parse_max_age(data["maxAge"]),
            include_subdomains=data["includeSubDomains"],
        )
