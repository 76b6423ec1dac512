"""Core modules for building GraphQL operations from introspection."""

from .arguments import extract_arg_specs, format_args, random_args, sample_args, to_literal
from .errors import (
    ArgumentValidationError,
    EmptySelectionError,
    GraphQLResponseError,
    MissingArguments,
    MissingRequiredArgument,
    OpGenError,
    SchemaLoadError,
    SchemaResolutionError,
)
from .executor import GraphQLExecutor, HttpTransport, Transport
from .field_tree import MAX_DEPTH, add_fields_path, resolve_field_tree
from .ir import (
    ArgDef,
    ArgSpec,
    FieldDef,
    FieldTree,
    IntrospectionSchema,
    ObjectField,
    ScalarField,
    TypeDef,
    TypeKind,
    TypeRef,
)
from .parser import IntrospectionParser
from .query_builder import (
    OperationBuilder,
    OperationCatalog,
    build_operations,
    get_graphql_builders,
    get_mutation_builders,
    get_query_builders,
    get_subscription_builders,
    make_query,
    normalize_document,
)
from .scalars import (
    BooleanHandler,
    DateTimeHandler,
    NumberHandler,
    RawHandler,
    ScalarHandler,
    ScalarRegistry,
    StringHandler,
)
from .type_index import build_type_index

__all__ = [
    # IR types
    "ArgDef",
    "ArgSpec",
    "FieldDef",
    "FieldTree",
    "IntrospectionSchema",
    "ObjectField",
    "ScalarField",
    "TypeDef",
    "TypeKind",
    "TypeRef",
    # Errors
    "OpGenError",
    "SchemaLoadError",
    "SchemaResolutionError",
    "ArgumentValidationError",
    "MissingArguments",
    "MissingRequiredArgument",
    "EmptySelectionError",
    "GraphQLResponseError",
    # Parser
    "IntrospectionParser",
    # Schema resolution
    "build_type_index",
    "resolve_field_tree",
    "add_fields_path",
    "MAX_DEPTH",
    # Arguments
    "extract_arg_specs",
    "format_args",
    "random_args",
    "sample_args",
    "to_literal",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    "StringHandler",
    "NumberHandler",
    "BooleanHandler",
    "DateTimeHandler",
    "RawHandler",
    # Query Builder
    "make_query",
    "normalize_document",
    "OperationBuilder",
    "OperationCatalog",
    "build_operations",
    "get_graphql_builders",
    "get_query_builders",
    "get_mutation_builders",
    "get_subscription_builders",
    # Executor
    "Transport",
    "HttpTransport",
    "GraphQLExecutor",
]
