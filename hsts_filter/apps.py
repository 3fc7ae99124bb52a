import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class HstsFilterConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hsts_filter"
    verbose_name = _("HSTS Filter")

    def ready(self) -> None:
        # Import checks to register system checks at app load
        from . import checks  # noqa: F401
        from .backends import load_backend
        from .conf import get_config
        from .policy import Policy
        from .registry import policy_store
        from .store import PolicyStore

        cfg = get_config()
        try:
            defaults = Policy.from_document(cfg["DEFAULTS"])
        except ValueError as exc:
            raise ImproperlyConfigured(
                f"HSTS_FILTER.DEFAULTS is invalid: {exc}"
            ) from exc

        backend = load_backend(cfg)
        policy_store.set(
            PolicyStore(
                backend,
                defaults=defaults,
                short_max_age_warning=cfg["SHORT_MAX_AGE_WARNING"],
                long_max_age_warning=cfg["LONG_MAX_AGE_WARNING"],
            )
        )

        logger.info("HSTS filter initialised with backend %s", backend.__class__.__name__)
