# Core building blocks shared by the graphql-core and strawberry surfaces.
from .defaults import DefaultKind, classify_type, default_for_kind, kind_from_type_string, resolve_not_found_value
from .fields import NOT_FOUND_VALUE_KEY, SafeField, SafeFieldPlan, explicit_not_found_value, read_property, to_graphql_field
from .naming import SAFE_OBJECT_SUFFIX, is_safe_type_name, safe_type_name

__all__ = [
    'DefaultKind', 'classify_type', 'default_for_kind', 'kind_from_type_string', 'resolve_not_found_value',
    'NOT_FOUND_VALUE_KEY', 'SafeField', 'SafeFieldPlan', 'explicit_not_found_value', 'read_property', 'to_graphql_field',
    'SAFE_OBJECT_SUFFIX', 'is_safe_type_name', 'safe_type_name',
]
