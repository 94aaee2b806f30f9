# rotina/errors.py
"""
Errors raised at the data-entry boundary.

The matcher and range expander never raise; only rule validation does.
"""
from __future__ import annotations

from typing import List, Optional, Tuple


class RotinaError(Exception):
    """Base class for errors raised by rotina."""


class InvalidConfiguration(RotinaError, ValueError):
    """A recurrence rule rejected at the data-entry boundary.

    ``errors`` holds ``(field, message)`` pairs suitable for showing next to
    the offending form inputs.
    """

    def __init__(self, message: str, errors: Optional[List[Tuple[str, str]]] = None):
        super().__init__(message)
        self.errors: List[Tuple[str, str]] = list(errors or [])

    def __str__(self) -> str:
        base = super().__str__()
        if not self.errors:
            return base
        details = "; ".join(f"{field}: {msg}" for field, msg in self.errors)
        return f"{base} ({details})"
