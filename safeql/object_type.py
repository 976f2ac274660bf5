"""GraphQLSafeObjectType: an object type whose fields never resolve to a bare ``None``.

Every field resolver is wrapped. When the underlying value is missing, the
wrapper returns the field's explicit ``not_found_value`` or a default inferred
from the field type:

- a safe object type        -> ``{}`` (its own fields then default in turn)
- a list of safe objects    -> ``[{}]``
- any other list            -> ``[]``
- anything else             -> ``None``

Example::

    Location = GraphQLSafeObjectType('Location', {
        'city': GraphQLField(GraphQLString),
        'state': GraphQLField(GraphQLString),
    })
    User = GraphQLSafeObjectType('User', {
        'username': SafeField(GraphQLString, not_found_value='unknown'),
        'location': GraphQLField(Location),
    })

Querying ``{ user { username location { city } } }`` against ``{}`` yields
``{'username': 'unknown', 'location': {'city': None}}``.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Union

from graphql import GraphQLField, GraphQLObjectType

from .core.fields import SafeFieldPlan, to_graphql_field
from .core.naming import safe_type_name
from .errors import SafeObjectConfigError

__all__ = ["GraphQLSafeObjectType", "wrap_fields"]

logger = logging.getLogger(__name__)

FieldsInput = Union[Mapping, Iterable, Callable[[], Any]]


def _field_items(type_name: str, fields: Any):
    if isinstance(fields, Mapping):
        return list(fields.items())
    if isinstance(fields, (str, bytes)) or not isinstance(fields, Iterable):
        raise SafeObjectConfigError(
            f"{type_name} fields must be a mapping or an iterable of (name, field) pairs,"
            f" got {type(fields).__name__}"
        )
    items = []
    for item in fields:
        try:
            name, value = item
        except (TypeError, ValueError) as error:
            raise SafeObjectConfigError(f"{type_name} has a malformed field entry: {item!r}") from error
        items.append((name, value))
    return items


def wrap_fields(type_name: str, fields: Any) -> Dict[str, GraphQLField]:
    """Build the wrapped field map for ``type_name``.

    Returns new ``GraphQLField`` objects; the caller's fields are left as they were.
    """
    wrapped: Dict[str, GraphQLField] = {}
    for name, value in _field_items(type_name, fields):
        if name in wrapped:
            raise SafeObjectConfigError(f"{type_name} defines field {name!r} more than once")
        field = to_graphql_field(name, value)
        plan = SafeFieldPlan.from_field(type_name, name, field)
        kwargs = field.to_kwargs()
        kwargs["resolve"] = plan
        wrapped[name] = GraphQLField(**kwargs)
    return wrapped


class GraphQLSafeObjectType(GraphQLObjectType):
    """Object type definition with not-found defaults on every field.

    Takes the same arguments as ``GraphQLObjectType``. The GraphQL name gets a
    ``SafeObject`` suffix. ``fields`` may be a mapping, an iterable of
    ``(name, field)`` pairs, or a thunk returning either. A thunk is wrapped
    lazily, which is how self-referencing safe types are built.

    A field's own ``resolve`` is called with the raw property value of the
    parent (``parent[field_name]``) instead of the parent itself.
    """

    def __init__(self, name: str, fields: FieldsInput, *args: Any, **kwargs: Any) -> None:
        full_name = safe_type_name(name)
        if callable(fields) and not isinstance(fields, Mapping):
            thunk = fields
            safe_fields: Any = lambda: wrap_fields(full_name, thunk())
        else:
            safe_fields = wrap_fields(full_name, fields)
            logger.debug("Built safe object type %s with %d fields", full_name, len(safe_fields))
        super().__init__(full_name, safe_fields, *args, **kwargs)
