from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from graphql import GraphQLField, GraphQLResolveInfo, default_field_resolver
from graphql.pyutils import Undefined, is_awaitable

from ..errors import SafeObjectConfigError
from .defaults import DefaultKind, classify_type, resolve_not_found_value

__all__ = [
    "NOT_FOUND_VALUE_KEY",
    "SafeField",
    "SafeFieldPlan",
    "read_property",
    "explicit_not_found_value",
    "to_graphql_field",
]

logger = logging.getLogger(__name__)

# Key under GraphQLField.extensions that carries an explicit not-found value
# for fields that are not SafeField instances (e.g. built from SDL).
NOT_FOUND_VALUE_KEY = "not_found_value"


class SafeField(GraphQLField):
    """A ``GraphQLField`` that also carries an explicit not-found value.

    Example::

        GraphQLSafeObjectType('User', {
            'username': SafeField(GraphQLString, not_found_value='unknown'),
            'age': SafeField(GraphQLInt, not_found_value=0),
        })

    Leaving ``not_found_value`` out lets the field type decide the default.
    Passing ``None`` is an explicit default of ``null``.
    """

    def __init__(self, type_: Any, *args: Any, not_found_value: Any = Undefined, **kwargs: Any) -> None:
        super().__init__(type_, *args, **kwargs)
        self.not_found_value = not_found_value

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type!r} not_found_value={self.not_found_value!r}>"


def read_property(source: Any, name: str) -> Any:
    """Read ``name`` off a parent value the way graphql-core's default resolver does."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def explicit_not_found_value(field: GraphQLField) -> Any:
    value = getattr(field, "not_found_value", Undefined)
    if value is Undefined:
        value = (field.extensions or {}).get(NOT_FOUND_VALUE_KEY, Undefined)
    return value


def to_graphql_field(name: str, value: Any) -> GraphQLField:
    """Normalize one entry of a field map into a ``GraphQLField``.

    Accepts a ``GraphQLField``, a mapping ``{"type": ..., "resolve": ...,
    "not_found_value": ...}`` or a bare output type.
    """
    if isinstance(value, GraphQLField):
        return value
    if isinstance(value, Mapping):
        config = dict(value)
        if "type" not in config:
            raise SafeObjectConfigError(f"Field {name!r} has no 'type'")
        type_ = config.pop("type")
        try:
            return SafeField(type_, **config)
        except TypeError as error:
            raise SafeObjectConfigError(f"Field {name!r} has an invalid config: {error}") from error
    return GraphQLField(value)


async def _await_then_default(plan: "SafeFieldPlan", pending: Any) -> Any:
    value = await pending
    if value is None:
        return plan.not_found()
    return value


@dataclass(frozen=True)
class SafeFieldPlan:
    """Everything a wrapped resolver needs, captured when the type is built."""

    type_name: str
    name: str
    resolve: Optional[Callable[..., Any]]
    not_found_value: Any
    kind: DefaultKind

    @classmethod
    def from_field(cls, type_name: str, name: str, field: GraphQLField) -> "SafeFieldPlan":
        return cls(
            type_name=type_name,
            name=name,
            resolve=field.resolve,
            not_found_value=explicit_not_found_value(field),
            kind=classify_type(field.type),
        )

    def not_found(self) -> Any:
        logger.debug("%s.%s not found, substituting %s default", self.type_name, self.name, self.kind.value)
        return resolve_not_found_value(self.not_found_value, self.kind)

    def __call__(self, source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        if self.resolve is None:
            value = default_field_resolver(source, info, **args)
        else:
            value = self.resolve(read_property(source, self.name), info, **args)
        if is_awaitable(value):
            return _await_then_default(self, value)
        if value is None:
            return self.not_found()
        return value
