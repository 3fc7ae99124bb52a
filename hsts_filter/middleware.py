"""
HSTS Header Middleware

Sets the Strict-Transport-Security header on every response according to
the current HSTS policy.
"""

from typing import Optional

from django.http import HttpResponse

from .policy import HEADER_NAME, Policy
from .store import PolicyStore


def decorate(response: HttpResponse, policy: Policy) -> HttpResponse:
    """
    Apply ``policy`` to ``response``.

    The header is set rather than added, so a value left by an earlier
    emitter is replaced. Nothing happens when sending is disabled or the
    policy has no usable max-age.
    """
    if not policy.send_header:
        return response

    value = policy.header_value()
    if value is None:
        return response

    response.headers[HEADER_NAME] = value
    return response


class HstsHeaderMiddleware:
    """
    Middleware adding Strict-Transport-Security to responses.

    Uses the project-wide policy store unless one is passed in.
    """

    def __init__(self, get_response, store: Optional[PolicyStore] = None):
        self.get_response = get_response
        self._store = store

    @property
    def store(self) -> PolicyStore:
        if self._store is None:
            from .registry import get_policy_store

            self._store = get_policy_store()
        return self._store

    def __call__(self, request):
        response = self.get_response(request)
        return self.decorate(response)

    def decorate(self, response: HttpResponse) -> HttpResponse:
        return decorate(response, self.store.current())
