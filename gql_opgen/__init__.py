"""Generate GraphQL query, mutation and subscription builders from introspection."""

from .core import (
    IntrospectionParser,
    OperationCatalog,
    get_mutation_builders,
    get_query_builders,
    get_subscription_builders,
)

__all__ = [
    "IntrospectionParser",
    "OperationCatalog",
    "get_query_builders",
    "get_mutation_builders",
    "get_subscription_builders",
]
