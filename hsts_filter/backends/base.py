from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class BasePolicyBackend(Protocol):
    def read(self) -> Optional[Dict[str, Any]]: ...

    def write(self, document: Dict[str, Any]) -> None: ...
