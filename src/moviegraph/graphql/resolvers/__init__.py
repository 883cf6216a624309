"""Resolver package for the GraphQL schema.

Resolvers read and write the record store found in the request context;
functions are defined in sibling modules.
"""
