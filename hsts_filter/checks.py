"""
Django system checks for hsts_filter.

Run with:
    python manage.py check --tag security
"""

from django.conf import settings
from django.core.checks import Error, Warning, register

from .conf import MIDDLEWARE_PATH, get_config
from .policy import coerce_bool, parse_max_age

DJANGO_SECURITY_MIDDLEWARE = "django.middleware.security.SecurityMiddleware"


@register("security")
def check_default_policy(app_configs, **kwargs):
    """Check the DEFAULTS document used before anything is persisted."""
    errors = []
    cfg = get_config()
    raw = cfg["DEFAULTS"].get("maxAge")

    try:
        max_age = parse_max_age(raw)
    except ValueError:
        errors.append(
            Error(
                f"HSTS_FILTER['DEFAULTS']['maxAge'] is not a non-negative integer: {raw!r}",
                hint="Use a whole number of seconds, e.g. '31536000'",
                id="hsts_filter.E001",
            )
        )
        return errors

    if coerce_bool(cfg["DEFAULTS"].get("sendHeader")) and max_age < cfg["SHORT_MAX_AGE_WARNING"]:
        errors.append(
            Warning(
                f"Default HSTS max-age is only {max_age} seconds",
                hint="Browsers forget the policy quickly; consider at least a day",
                id="hsts_filter.W003",
            )
        )

    return errors


@register("security")
def check_middleware_installed(app_configs, **kwargs):
    """Check the middleware is wired into the project."""
    errors = []
    middleware = list(getattr(settings, "MIDDLEWARE", []) or [])

    if MIDDLEWARE_PATH not in middleware:
        errors.append(
            Warning(
                "HstsHeaderMiddleware is not in MIDDLEWARE; no HSTS header will be sent",
                hint=f"Add '{MIDDLEWARE_PATH}' to MIDDLEWARE",
                id="hsts_filter.W001",
            )
        )

    if DJANGO_SECURITY_MIDDLEWARE in middleware and getattr(settings, "SECURE_HSTS_SECONDS", 0):
        errors.append(
            Warning(
                "SECURE_HSTS_SECONDS is set while hsts_filter also manages the header",
                hint="Set SECURE_HSTS_SECONDS = 0 and configure HSTS through hsts_filter",
                id="hsts_filter.W002",
            )
        )

    return errors
