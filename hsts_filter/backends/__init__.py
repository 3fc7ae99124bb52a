from typing import Any, Dict

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .base import BasePolicyBackend

__all__ = ["BasePolicyBackend", "load_backend"]


def load_backend(cfg: Dict[str, Any]) -> BasePolicyBackend:
    backend_path = cfg.get("BACKEND")
    if not backend_path:
        raise ImproperlyConfigured("HSTS_FILTER.BACKEND is not defined.")
    try:
        backend_cls = import_string(backend_path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"Could not import HSTS policy backend {backend_path}"
        ) from exc
    return backend_cls(cfg)
