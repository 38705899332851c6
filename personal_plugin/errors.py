from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    STORAGE = "storage"
    INPUT = "input"


class StoreError(Exception):
    """Raised by the low-level store helpers when the data file cannot be used."""

    category = ErrorCategory.STORAGE
