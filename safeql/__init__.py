"""safeql public API.

Exposes:
- GraphQLSafeObjectType, SafeField: graphql-core object types with not-found defaults
- DefaultKind, classify_type, kind_from_type_string, default_for_kind, resolve_not_found_value
- SafeObjectConfigError
- Lazy strawberry helpers: safe_type, safe_field, safe_getattr, safe_config, NotFoundValueExtension

The strawberry helpers are resolved on first attribute access so that plain
graphql-core users never import strawberry.
"""
from __future__ import annotations

from .core.defaults import DefaultKind, classify_type, default_for_kind, kind_from_type_string, resolve_not_found_value
from .core.fields import NOT_FOUND_VALUE_KEY, SafeField
from .core.naming import SAFE_OBJECT_SUFFIX
from .errors import SafeObjectConfigError
from .object_type import GraphQLSafeObjectType

_STRAWBERRY_EXPORTS = {'safe_type', 'safe_field', 'safe_getattr', 'safe_config', 'NotFoundValueExtension'}


def __getattr__(name: str):  # PEP 562 lazy exports
    if name in _STRAWBERRY_EXPORTS or name == 'strawberry_support':
        import importlib as _importlib
        _module = _importlib.import_module(__name__ + '.strawberry_support')
        if name == 'strawberry_support':
            return _module
        return getattr(_module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'GraphQLSafeObjectType', 'SafeField', 'SAFE_OBJECT_SUFFIX', 'NOT_FOUND_VALUE_KEY',
    'DefaultKind', 'classify_type', 'kind_from_type_string', 'default_for_kind', 'resolve_not_found_value',
    'SafeObjectConfigError',
    'safe_type', 'safe_field', 'safe_getattr', 'safe_config', 'NotFoundValueExtension',
]
