from typing import Optional

from django.core.exceptions import ImproperlyConfigured

from .store import PolicyStore


class _PolicyStoreHolder:
    def __init__(self) -> None:
        self._store: Optional[PolicyStore] = None

    def set(self, store: PolicyStore) -> None:
        self._store = store

    def get(self) -> Optional[PolicyStore]:
        return self._store


policy_store = _PolicyStoreHolder()


def get_policy_store() -> PolicyStore:
    store = policy_store.get()
    if store is None:
        raise ImproperlyConfigured(
            "HSTS policy store is not initialised; add 'hsts_filter' to INSTALLED_APPS."
        )
    return store
