"""Resolver functions for the GraphQL schema.

Type modules import these lazily inside their field methods, so a related
entity is only looked up when the client actually selects that field.
"""

# Intentionally empty; functions are defined in sibling modules.
