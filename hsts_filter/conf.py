"""Configuration and settings for hsts_filter."""

from copy import deepcopy
from typing import Any, Dict

MIDDLEWARE_PATH = "hsts_filter.middleware.HstsHeaderMiddleware"

DEFAULT_HSTS_CONFIG: Dict[str, Any] = {
    # Persistence
    "BACKEND": "hsts_filter.backends.database.DatabaseBackend",
    "FILE_PATH": None,  # Required by JSONFileBackend
    # Policy installed when nothing has been persisted yet
    "DEFAULTS": {
        "sendHeader": True,
        "maxAge": "31536000",  # 1 year
        "includeSubDomains": True,
    },
    # Accepted values outside this window are logged
    "SHORT_MAX_AGE_WARNING": 300,  # 5 minutes
    "LONG_MAX_AGE_WARNING": 63072000,  # 2 years
}


def get_config() -> Dict[str, Any]:
    """Return ``settings.HSTS_FILTER`` merged over the defaults."""
    from django.conf import settings

    merged = deepcopy(DEFAULT_HSTS_CONFIG)
    for key, val in (getattr(settings, "HSTS_FILTER", None) or {}).items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key].update(val)
        else:
            merged[key] = val
    return merged


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get an hsts_filter setting from Django settings or use default.

    Args:
        key: Dotted path to the setting (e.g., 'DEFAULTS.maxAge')
        default: Default value if setting is not found

    Returns:
        The setting value or default
    """
    value: Any = get_config()
    for k in key.split("."):
        if isinstance(value, dict):
            value = value.get(k)
        else:
            value = None
            break

    return value if value is not None else default


def install(settings_dict: Dict[str, Any]) -> None:
    """
    Register the app and its middleware in a settings module.

    Example:
        # In settings.py
        from hsts_filter.conf import install
        install(globals())
    """
    apps = list(settings_dict.get("INSTALLED_APPS", []))
    if "hsts_filter" not in apps and "hsts_filter.apps.HstsFilterConfig" not in apps:
        apps.append("hsts_filter")
    settings_dict["INSTALLED_APPS"] = apps

    middleware_list = list(settings_dict.get("MIDDLEWARE", []))
    if MIDDLEWARE_PATH not in middleware_list:
        # Insert after SecurityMiddleware if it exists, otherwise at the beginning
        if "django.middleware.security.SecurityMiddleware" in middleware_list:
            idx = middleware_list.index("django.middleware.security.SecurityMiddleware") + 1
            middleware_list.insert(idx, MIDDLEWARE_PATH)
        else:
            middleware_list.insert(0, MIDDLEWARE_PATH)
    settings_dict["MIDDLEWARE"] = middleware_list
