"""Not-found defaults for strawberry code-first types.

Usage::

    @safe_type
    class Location:
        city: Optional[str]
        state: Optional[str]

    @safe_type
    class User:
        location: Optional[Location]
        username: Optional[str] = safe_field(not_found_value="unknown")

    schema = strawberry.Schema(query=Query, config=safe_config())

``safe_config`` installs :func:`safe_getattr` as the default resolver so that
dict data and the ``{}`` / ``[{}]`` placeholders resolve like objects.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional

import strawberry
from graphql.pyutils import Undefined
from strawberry.extensions import FieldExtension
from strawberry.schema.config import StrawberryConfig
from strawberry.types.base import StrawberryList, StrawberryOptional, get_object_definition

from .core.defaults import DefaultKind, resolve_not_found_value
from .core.naming import is_safe_type_name, safe_type_name

__all__ = [
    'NotFoundValueExtension',
    'classify_strawberry_type',
    'safe_field',
    'safe_type',
    'safe_getattr',
    'safe_config',
]

logger = logging.getLogger(__name__)


def _unwrap_optional(type_: Any) -> Any:
    while isinstance(type_, StrawberryOptional):
        type_ = type_.of_type
    return type_


def _is_safe_object(type_: Any) -> bool:
    definition = get_object_definition(type_)
    if definition is None or definition.is_input:
        return False
    return is_safe_type_name(definition.name)


def classify_strawberry_type(type_: Any) -> DefaultKind:
    """Classify a strawberry field type, peeling ``Optional`` at both levels."""
    type_ = _unwrap_optional(type_)
    if isinstance(type_, StrawberryList):
        if _is_safe_object(_unwrap_optional(type_.of_type)):
            return DefaultKind.LIST_OF_SAFE_OBJECT
        return DefaultKind.LIST_OF_OTHER
    if _is_safe_object(type_):
        return DefaultKind.SAFE_OBJECT
    return DefaultKind.SCALAR


class NotFoundValueExtension(FieldExtension):
    """Replaces a ``None`` field result with a not-found value.

    The field type is classified once in :meth:`apply`; an explicit
    ``not_found_value`` (``None`` included) always wins over the inferred one.
    """

    def __init__(self, not_found_value: Any = Undefined) -> None:
        self.not_found_value = not_found_value
        self.kind: Optional[DefaultKind] = None
        self.field_name: Optional[str] = None

    def apply(self, field: Any) -> None:
        self.field_name = field.python_name
        self.kind = classify_strawberry_type(field.type)

    def _substitute(self, value: Any, info: Any) -> Any:
        if value is not None:
            return value
        kind = self.kind
        if kind is None:
            kind = classify_strawberry_type(getattr(info, 'return_type', None))
        logger.debug("%s not found, substituting %s default", self.field_name or info.field_name, kind.value)
        return resolve_not_found_value(self.not_found_value, kind)

    def resolve(self, next_: Callable[..., Any], source: Any, info: Any, **kwargs: Any) -> Any:
        return self._substitute(next_(source, info, **kwargs), info)

    async def resolve_async(self, next_: Callable[..., Awaitable[Any]], source: Any, info: Any, **kwargs: Any) -> Any:
        return self._substitute(await next_(source, info, **kwargs), info)


def safe_field(resolver: Optional[Callable[..., Any]] = None, *, not_found_value: Any = Undefined, **kwargs: Any) -> Any:
    """``strawberry.field`` with a :class:`NotFoundValueExtension` attached.

    Accepts every ``strawberry.field`` keyword; extra ``extensions`` run before
    the not-found substitution.
    """
    extensions = list(kwargs.pop('extensions', None) or [])
    extensions.append(NotFoundValueExtension(not_found_value))
    return strawberry.field(resolver, extensions=extensions, **kwargs)


def safe_type(cls: Optional[type] = None, *, name: Optional[str] = None, **kwargs: Any) -> Any:
    """``strawberry.type`` producing a safe object type.

    The GraphQL name gets the ``SafeObject`` suffix and every field without a
    :class:`NotFoundValueExtension` gets one with an inferred default.
    """
    def wrap(cls: type) -> type:
        type_cls = strawberry.type(cls, name=safe_type_name(name or cls.__name__), **kwargs)
        definition = get_object_definition(type_cls, strict=True)
        for field in definition.fields:
            if not any(isinstance(ext, NotFoundValueExtension) for ext in field.extensions):
                field.extensions.append(NotFoundValueExtension())
        return type_cls

    if cls is None:
        return wrap
    return wrap(cls)


def safe_getattr(obj: Any, name: str) -> Any:
    """Default resolver reading mapping keys or attributes, ``None`` when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def safe_config(**kwargs: Any) -> StrawberryConfig:
    kwargs.setdefault('default_resolver', safe_getattr)
    return StrawberryConfig(**kwargs)
