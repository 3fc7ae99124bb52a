"""
HSTS Policy Store

Owns the process-wide HSTS policy: loads it from the configured backend,
validates operator changes and persists them.

Readers get the current immutable ``Policy`` through ``current()``, which is
a plain attribute read once the policy has been loaded. Writers build a new
``Policy`` and replace the reference, so a reader sees either the old triple
or the new one, never a mix.
"""

import logging
import threading
from typing import Any, Mapping, Optional

from django.utils.translation import gettext

from .backends import BasePolicyBackend
from .exceptions import (
    ConfigLoadCorruptError,
    ConfigPersistenceError,
    ConfigValidationError,
)
from .forms import HstsPolicyForm
from .policy import Policy
from .signals import policy_changed

logger = logging.getLogger(__name__)


class PolicyStore:
    """
    Canonical holder of the HSTS policy.

    Args:
        backend: Persistence backend (see ``hsts_filter.backends``)
        defaults: Policy installed when nothing is persisted
        short_max_age_warning: Accepted max-age values below this are logged
        long_max_age_warning: Accepted max-age values above this are logged
    """

    def __init__(
        self,
        backend: BasePolicyBackend,
        defaults: Optional[Policy] = None,
        short_max_age_warning: int = 300,
        long_max_age_warning: int = 63072000,
    ):
        self.backend = backend
        self.defaults = defaults or Policy.default()
        self.short_max_age_warning = short_max_age_warning
        self.long_max_age_warning = long_max_age_warning

        self._policy: Optional[Policy] = None
        self._load_lock = threading.Lock()
        self._write_lock = threading.Lock()

    def load(self) -> Policy:
        """
        Read the persisted policy, falling back to the defaults.

        A missing document is normal on first start. A document that cannot
        be decoded is logged and replaced by the defaults in memory.
        """
        try:
            document = self.backend.read()
            if document is None:
                policy = self.defaults
            else:
                policy = Policy.from_document(document)
        except (ConfigLoadCorruptError, ValueError) as exc:
            logger.error(
                "Persisted HSTS policy is unreadable or corrupt, using defaults: %s", exc
            )
            policy = self.defaults

        self._policy = policy
        return policy

    def current(self) -> Policy:
        """Return the current policy snapshot."""
        policy = self._policy
        if policy is None:
            with self._load_lock:
                policy = self._policy
                if policy is None:
                    policy = self.load()
        return policy

    def reset(self) -> None:
        """Forget the loaded policy; the next ``current()`` reloads it."""
        with self._load_lock:
            self._policy = None

    def configure(self, document: Mapping[str, Any]) -> Policy:
        """
        Validate a configuration document and make it the current policy.

        Args:
            document: Mapping with ``sendHeader``, ``maxAge`` and
                ``includeSubDomains``; absent booleans mean False

        Returns:
            The newly installed Policy

        Raises:
            ConfigValidationError: the document was rejected; nothing changed
            ConfigPersistenceError: the policy is live in memory but was not
                saved
        """
        form = HstsPolicyForm(data=document)
        if not form.is_valid():
            errors = {field: list(messages) for field, messages in form.errors.items()}
            raise ConfigValidationError(errors)

        policy = form.to_policy()

        with self._write_lock:
            previous = self.current()
            self._policy = policy

            self._warn_if_risky(policy)
            logger.info(
                "HSTS policy updated: send_header=%s max_age=%s include_subdomains=%s",
                policy.send_header,
                policy.max_age,
                policy.include_subdomains,
            )

            try:
                self.backend.write(policy.to_document())
            except ConfigPersistenceError:
                logger.exception("HSTS policy applied but could not be saved")
                self._notify_changed(policy, previous, saved=False)
                raise

            self._notify_changed(policy, previous, saved=True)

        return policy

    def display_name(self) -> str:
        return gettext("HSTS Filter")

    def _notify_changed(self, policy: Policy, previous: Policy, saved: bool) -> None:
        responses = policy_changed.send_robust(
            sender=self.__class__,
            store=self,
            policy=policy,
            previous=previous,
            saved=saved,
        )
        for receiver, response in responses:
            if isinstance(response, Exception):
                logger.error(
                    "policy_changed receiver %r failed: %s",
                    receiver,
                    response,
                    exc_info=response,
                )

    def _warn_if_risky(self, policy: Policy) -> None:
        if not policy.send_header:
            return
        if policy.max_age < self.short_max_age_warning:
            logger.warning(
                "HSTS max-age of %s seconds is very short and gives little protection",
                policy.max_age,
            )
        elif policy.max_age > self.long_max_age_warning:
            logger.warning(
                "HSTS max-age of %s seconds is unusually long; browsers will keep "
                "refusing plain HTTP for that long",
                policy.max_age,
            )
