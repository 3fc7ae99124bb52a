from __future__ import annotations

import json
import os
import tempfile
from typing import Any, Dict, Optional

from django.core.exceptions import ImproperlyConfigured

from ..exceptions import ConfigLoadCorruptError, ConfigPersistenceError


class JSONFileBackend:
    """
    Keep the policy document as a JSON object on disk.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a crash never leaves a half-written document behind.
    """

    def __init__(self, cfg: Dict[str, Any]) -> None:
        path = cfg.get("FILE_PATH")
        if not path:
            raise ImproperlyConfigured(
                "HSTS_FILTER.FILE_PATH is required by JSONFileBackend."
            )
        self.path = os.fspath(path)

    def read(self) -> Optional[Dict[str, Any]]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                document = json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            raise ConfigLoadCorruptError(f"Could not read {self.path}: {exc}") from exc

        if not isinstance(document, dict):
            raise ConfigLoadCorruptError(f"{self.path} does not hold a JSON object")
        return document

    def write(self, document: Dict[str, Any]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".hsts-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(document, fh, sort_keys=True, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise ConfigPersistenceError(f"Could not write {self.path}: {exc}") from exc
