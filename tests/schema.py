"""Shared safe object types used across the test suite."""
from __future__ import annotations

from typing import Any

from graphql import GraphQLArgument, GraphQLField, GraphQLInt, GraphQLList, GraphQLObjectType, GraphQLSchema, GraphQLString

from safeql import GraphQLSafeObjectType, SafeField


def build_schema(safe_object: GraphQLObjectType, data: Any) -> GraphQLSchema:
    """Root ``user`` field returning ``data`` as a ``safe_object``."""
    return GraphQLSchema(
        query=GraphQLObjectType(
            'Query',
            {
                'user': GraphQLField(
                    safe_object,
                    args={'id': GraphQLArgument(GraphQLInt)},
                    resolve=lambda _source, _info, **_args: data,
                )
            },
        )
    )


def contact_type() -> GraphQLSafeObjectType:
    return GraphQLSafeObjectType('Contact', {'name': GraphQLField(GraphQLString)})


def location_type() -> GraphQLSafeObjectType:
    return GraphQLSafeObjectType(
        'Location',
        {
            'city': GraphQLField(GraphQLString),
            'state': GraphQLField(GraphQLString),
            'contact': GraphQLField(contact_type()),
        },
    )


def user_with_location() -> GraphQLSafeObjectType:
    return GraphQLSafeObjectType(
        'SafeObject',
        {
            'username': SafeField(GraphQLString, not_found_value='unknown'),
            'location': GraphQLField(location_type()),
        },
    )


def user_with_locations(**locations_kwargs: Any) -> GraphQLSafeObjectType:
    return GraphQLSafeObjectType(
        'SafeObject',
        {
            'username': SafeField(GraphQLString, not_found_value='unknown'),
            'locations': SafeField(GraphQLList(location_type()), **locations_kwargs),
        },
    )


LOCATION_QUERY = """
query {
  user {
    username
    location { city state contact { name } }
  }
}
"""

LOCATIONS_QUERY = """
query {
  user {
    username
    locations { city state contact { name } }
  }
}
"""
