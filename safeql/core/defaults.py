"""Not-found value inference.

Every safe field is classified once into a :class:`DefaultKind`. When its
resolver produces ``None`` the kind decides the substitute, unless the caller
gave an explicit ``not_found_value``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from graphql import GraphQLNamedType, GraphQLType, get_nullable_type, is_list_type, is_object_type
from graphql.pyutils import Undefined

from .naming import SAFE_OBJECT_SUFFIX, is_safe_type_name

__all__ = [
    "DefaultKind",
    "kind_from_type_string",
    "classify_type",
    "default_for_kind",
    "resolve_not_found_value",
]


class DefaultKind(Enum):
    SCALAR = "scalar"
    SAFE_OBJECT = "safe_object"
    LIST_OF_SAFE_OBJECT = "list_of_safe_object"
    LIST_OF_OTHER = "list_of_other"


def kind_from_type_string(text: Any) -> DefaultKind:
    """Classify a type by the suffix of its printed form.

    ``LocationSafeObject`` -> SAFE_OBJECT, ``[LocationSafeObject]`` ->
    LIST_OF_SAFE_OBJECT, any other ``[...]`` -> LIST_OF_OTHER, anything else
    (including an empty string) -> SCALAR. First match wins.
    """
    if not isinstance(text, str):
        text = "" if text is None else str(text)
    if text.endswith(SAFE_OBJECT_SUFFIX):
        return DefaultKind.SAFE_OBJECT
    if text.endswith(SAFE_OBJECT_SUFFIX + "]"):
        return DefaultKind.LIST_OF_SAFE_OBJECT
    if text.endswith("]"):
        return DefaultKind.LIST_OF_OTHER
    return DefaultKind.SCALAR


def _is_safe_object(type_: Any) -> bool:
    return is_object_type(type_) and is_safe_type_name(type_.name)


def classify_type(type_ref: Any) -> DefaultKind:
    """Classify a graphql-core output type.

    Non-null wrappers are peeled on the field and on the list item, so
    ``[LocationSafeObject!]!`` is a list of safe objects. Anything that is not
    a graphql-core type is classified by its printed form.
    """
    if not isinstance(type_ref, GraphQLType):
        return kind_from_type_string(type_ref)
    nullable = get_nullable_type(type_ref)
    if is_list_type(nullable):
        item = get_nullable_type(nullable.of_type)
        if _is_safe_object(item):
            return DefaultKind.LIST_OF_SAFE_OBJECT
        return DefaultKind.LIST_OF_OTHER
    if _is_safe_object(nullable):
        return DefaultKind.SAFE_OBJECT
    if isinstance(nullable, GraphQLNamedType):
        return DefaultKind.SCALAR
    return kind_from_type_string(str(nullable))


def default_for_kind(kind: DefaultKind) -> Any:
    # Fresh containers on every call; callers may hand them to the executor.
    if kind is DefaultKind.SAFE_OBJECT:
        return {}
    if kind is DefaultKind.LIST_OF_SAFE_OBJECT:
        # One synthetic element so the item type's own defaults stay visible.
        return [{}]
    if kind is DefaultKind.LIST_OF_OTHER:
        return []
    return None


def resolve_not_found_value(explicit: Any, kind: DefaultKind) -> Any:
    """Return the value that replaces a nullish result.

    ``explicit`` wins whenever it was supplied, even if it is ``None``, ``0``,
    ``False`` or empty. Only ``Undefined`` means "not supplied".
    """
    if explicit is not Undefined:
        return explicit
    return default_for_kind(kind)
