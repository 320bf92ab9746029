"""Resolver package for GraphQL schema.

Resolver functions take the Strawberry ``Info`` object, read the shared
database from the request context, and delegate to the service layer.
"""
