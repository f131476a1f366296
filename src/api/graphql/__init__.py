"""
GraphQL API package.

Exposes the user registration mutation through strawberry.
"""

from src.api.graphql.schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
