"""
HSTS Filter - Strict-Transport-Security for Django

Adds a single ``Strict-Transport-Security`` response header governed by an
operator-editable policy (send header, max-age, includeSubDomains) that is
persisted across restarts.
"""

__version__ = "1.0.0"
