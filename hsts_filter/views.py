"""
HSTS policy configuration endpoint.

``GET`` returns the current policy document; ``POST`` accepts a new one as
JSON or as a regular form post and routes it to the policy store.
"""

import functools
import json

from django.http import JsonResponse
from django.utils.translation import gettext as _
from django.views.decorators.http import require_http_methods

from .exceptions import ConfigPersistenceError, ConfigValidationError
from .registry import get_policy_store


def staff_required(view_func):
    """Reject anyone who is not an active staff user with a JSON 403."""

    @functools.wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        user = getattr(request, "user", None)
        if not (user and user.is_active and user.is_staff):
            return JsonResponse({"error": "Forbidden"}, status=403)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def _policy_payload(store, status):
    policy = store.current()
    return {
        "status": status,
        "displayName": store.display_name(),
        "policy": policy.to_document(),
        "header": policy.header_value() if policy.send_header else None,
    }


def _read_document(request):
    if request.content_type == "application/json":
        document = json.loads(request.body or b"{}")
        if not isinstance(document, dict):
            raise ValueError("Expected a JSON object")
        return document
    return request.POST


@staff_required
@require_http_methods(["GET", "POST"])
def policy_view(request):
    store = get_policy_store()

    if request.method == "GET":
        return JsonResponse(_policy_payload(store, "ok"))

    try:
        document = _read_document(request)
    except ValueError:
        return JsonResponse({"error": "Malformed JSON body"}, status=400)

    try:
        store.configure(document)
    except ConfigValidationError as exc:
        return JsonResponse({"error": str(exc), "details": exc.errors}, status=400)
    except ConfigPersistenceError:
        payload = _policy_payload(store, "warning")
        payload["message"] = _(
            "The HSTS policy is active but could not be saved; it will be lost on restart."
        )
        return JsonResponse(payload)

    return JsonResponse(_policy_payload(store, "saved"))
