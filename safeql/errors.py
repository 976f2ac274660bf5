"""Exceptions raised by safeql."""
from __future__ import annotations

__all__ = ["SafeObjectConfigError"]


class SafeObjectConfigError(ValueError):
    """Raised when a safe object type is given a field map it cannot build from."""
    pass
