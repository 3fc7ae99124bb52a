"""
HSTS policy record.

The policy is an immutable triple; a reconfiguration publishes a new record
rather than mutating the current one, so readers always see a consistent
(send_header, max_age, include_subdomains) combination.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

HEADER_NAME = "Strict-Transport-Security"

DEFAULT_SEND_HEADER = True
DEFAULT_MAX_AGE = "31536000"
DEFAULT_INCLUDE_SUBDOMAINS = True

TRUE_STRINGS = {"on", "true", "1", "yes"}


def parse_max_age(value: Any) -> int:
    """
    Parse a max-age value as a non-negative decimal integer.

    Surrounding whitespace is ignored. Signs, separators and non-ASCII digits
    are rejected.

    Raises:
        ValueError: if the value is not a non-negative decimal integer
    """
    if isinstance(value, bool):
        raise ValueError(f"max-age must be a decimal integer, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"max-age must not be negative, got {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"max-age must be a decimal integer, got {value!r}")

    text = value.strip()
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"max-age must be a non-negative decimal integer, got {value!r}")
    return int(text)


def coerce_bool(value: Any) -> bool:
    """Interpret a form or JSON value; anything unrecognised is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    if isinstance(value, int):
        return value == 1
    return False


@dataclass(frozen=True)
class Policy:
    send_header: bool
    max_age: int
    include_subdomains: bool

    @classmethod
    def default(cls) -> "Policy":
        return cls(
            send_header=DEFAULT_SEND_HEADER,
            max_age=int(DEFAULT_MAX_AGE),
            include_subdomains=DEFAULT_INCLUDE_SUBDOMAINS,
        )

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Policy":
        """
        Decode a configuration document.

        Absent booleans are False (form-post semantics) and unknown keys are
        ignored. ``maxAge`` is required.

        Raises:
            ValueError: if ``maxAge`` is missing or invalid
        """
        if "maxAge" not in document:
            raise ValueError("maxAge is required")
        return cls(
            send_header=coerce_bool(document.get("sendHeader")),
            max_age=parse_max_age(document["maxAge"]),
            include_subdomains=coerce_bool(document.get("includeSubDomains")),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "sendHeader": self.send_header,
            "maxAge": str(self.max_age),
            "includeSubDomains": self.include_subdomains,
        }

    def header_value(self) -> Optional[str]:
        """
        Compose the header value, or None when max_age is unusable.

        Grammar: ``"max-age=" 1*DIGIT [ "; includeSubDomains" ]``
        """
        try:
            max_age = parse_max_age(self.max_age)
        except ValueError:
            return None

        value = f"max-age={max_age}"
        if self.include_subdomains:
            value += "; includeSubDomains"
        return value
