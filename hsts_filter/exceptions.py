"""Exceptions raised by the HSTS policy store and its backends."""

from typing import Dict, List, Optional


class HstsFilterError(Exception):
    """Base class for hsts_filter errors."""


class ConfigValidationError(HstsFilterError):
    """
    The submitted configuration document was rejected.

    ``errors`` maps field names to lists of human-readable messages, the same
    shape as ``Form.errors``. The current policy is left untouched.
    """

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message or "Invalid HSTS policy configuration")


class ConfigPersistenceError(HstsFilterError):
    """
    The policy was applied in memory but could not be written to storage.

    The in-memory policy stays authoritative for the life of the process.
    """


class ConfigLoadCorruptError(HstsFilterError):
    """A persisted policy document exists but could not be decoded."""
