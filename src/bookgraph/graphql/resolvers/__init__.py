"""Resolver package for GraphQL schema.

Resolvers read the book catalog from the GraphQL context under the
``"catalog"`` key; the transport layer is responsible for placing it there.
"""
