from __future__ import annotations

from typing import Any, Dict, Optional

from django.db import DatabaseError, connections, router, transaction

from ..exceptions import ConfigLoadCorruptError, ConfigPersistenceError
from ..models import HstsPolicyRecord


class DatabaseBackend:
    """Keep the policy document in the single ``HstsPolicyRecord`` row."""

    def __init__(self, cfg: Dict[str, Any]) -> None:
        self.cfg = cfg

    def read(self) -> Optional[Dict[str, Any]]:
        try:
            record = HstsPolicyRecord.objects.filter(
                singleton_key=HstsPolicyRecord.SINGLETON_KEY
            ).first()
        except DatabaseError as exc:
            if not self._table_exists():
                # Not migrated yet: nothing has been persisted
                return None
            raise ConfigLoadCorruptError(f"Could not read HSTS policy: {exc}") from exc
        if record is None:
            return None
        return record.to_document()

    def _table_exists(self) -> bool:
        connection = connections[router.db_for_read(HstsPolicyRecord)]
        try:
            with connection.cursor() as cursor:
                tables = connection.introspection.table_names(cursor)
        except DatabaseError:
            # Database unreachable; report the read failure
            return True
        return HstsPolicyRecord._meta.db_table in tables

    def write(self, document: Dict[str, Any]) -> None:
        try:
            with transaction.atomic():
                HstsPolicyRecord.objects.update_or_create(
                    singleton_key=HstsPolicyRecord.SINGLETON_KEY,
                    defaults={
                        "send_header": document["sendHeader"],
                        "max_age": document["maxAge"],
                        "include_subdomains": document["includeSubDomains"],
                    },
                )
        except DatabaseError as exc:
            raise ConfigPersistenceError(f"Could not save HSTS policy: {exc}") from exc
