"""Naming helpers for safe object types.

A safe object type is recognised purely by name: the decorator appends
``SAFE_OBJECT_SUFFIX`` and default inference looks for it again.
"""
from __future__ import annotations

from typing import Any

__all__ = ["SAFE_OBJECT_SUFFIX", "safe_type_name", "is_safe_type_name"]

SAFE_OBJECT_SUFFIX = "SafeObject"


def safe_type_name(name: Any) -> str:
    """Return the GraphQL name of the safe variant of ``name``.

    The suffix is always appended, so ``"SafeObject"`` becomes
    ``"SafeObjectSafeObject"``.
    """
    return f"{name}{SAFE_OBJECT_SUFFIX}"


def is_safe_type_name(name: Any) -> bool:
    if not isinstance(name, str):
        return False
    return name.endswith(SAFE_OBJECT_SUFFIX)
