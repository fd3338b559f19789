"""
GraphQL API: schema, types and resolvers for users, posts and comments
"""

from .schema import create_graphql_router, schema, validate_schema

__all__ = ["schema", "create_graphql_router", "validate_schema"]
