"""Query builder for GraphQL operations.

Constructs one callable builder per field of a query, mutation or
subscription root type. Each builder turns call-time argument values into
a complete GraphQL document.
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from graphql import parse, print_ast

from .arguments import extract_arg_specs, format_args
from .errors import EmptySelectionError, SchemaResolutionError
from .field_tree import MAX_DEPTH, add_fields_path, resolve_field_tree
from .ir import ArgDef, ArgSpec, FieldDef, FieldTree, IntrospectionSchema, TypeDef
from .scalars import ScalarRegistry, default_registry
from .type_index import TypeIndex, build_type_index

logger = logging.getLogger(__name__)

OPERATION_KEYWORDS = {
    "query": "",
    "mutation": "mutation",
    "subscription": "subscription",
}

IgnoreFields = Sequence[str] | Callable[[FieldDef], Sequence[str]]


def make_query(fields: FieldTree, ignore_fields: Iterable[str] = ()) -> str:
    """Render a field tree as the body of a selection set.

    ``ignore_fields`` holds exact dotted paths. Object fields whose
    remaining selection is empty are left out entirely.
    """
    ignored = set(ignore_fields)
    lines = [f.name for f in fields.scalar if f.path not in ignored]

    for obj in fields.object:
        if obj.path in ignored:
            continue
        selection = make_query(obj.fields, ignored)
        if selection:
            lines.append(f"{obj.name} {{\n{selection}\n}}")

    return "\n".join(lines)


def normalize_document(document: str) -> str:
    """Parse and re-print a document, which also rejects invalid syntax."""
    return print_ast(parse(document))


class OperationBuilder:
    """Builds the GraphQL document for a single root field.

    Attributes:
        name: The root field name, e.g. ``listTransactions``
        operation_type: 'query', 'mutation' or 'subscription'
        fields: Annotated field tree of the return type, None for leaf returns
        args: Declared arguments keyed by name
        arg_specs: Normalized argument specs, including nested input fields
    """

    def __init__(
        self,
        field_def: FieldDef,
        operation_type: str,
        fields: FieldTree | None,
        arg_specs: dict[str, ArgSpec],
        ignore_fields: IgnoreFields | None = None,
        registry: ScalarRegistry = default_registry,
        normalize: bool = True,
    ):
        self.field = field_def
        self.name = field_def.name
        self.operation_type = operation_type
        self.fields = fields
        self.args: dict[str, ArgDef] = {a.name: a for a in field_def.args}
        self.arg_specs = arg_specs
        self._ignore_fields = ignore_fields
        self._registry = registry
        self._normalize = normalize

    @property
    def required_args(self) -> list[str]:
        return [name for name, spec in self.arg_specs.items() if spec.required]

    def __call__(
        self,
        values: Mapping[str, Any] | None = None,
        *,
        ignore_fields: IgnoreFields | None = None,
    ) -> str:
        """Build the document for this operation.

        Args:
            values: Argument values, required when the field declares arguments
            ignore_fields: Dotted paths to leave out, or a function of the
                root field returning them; defaults to the exclusions given
                when the builders were created

        Returns:
            The GraphQL document text
        """
        arg_str = ""
        if self.args:
            arg_str = format_args(values, self.args, self._registry, self.arg_specs)
        call = f"{self.name}({arg_str})" if arg_str else self.name

        if self.fields is None:
            body = call
        else:
            selection = make_query(self.fields, self._resolve_ignore_fields(ignore_fields))
            if not selection:
                raise EmptySelectionError(self.name)
            body = f"{call} {{\n{selection}\n}}"

        keyword = OPERATION_KEYWORDS[self.operation_type]
        document = f"{keyword} {{\n{body}\n}}".lstrip()
        return normalize_document(document) if self._normalize else document

    def _resolve_ignore_fields(self, ignore_fields: IgnoreFields | None) -> Sequence[str]:
        if ignore_fields is None:
            ignore_fields = self._ignore_fields
        if callable(ignore_fields):
            ignore_fields = ignore_fields(self.field)
        # A lone path is one exclusion, not a sequence of characters
        if isinstance(ignore_fields, str):
            return [ignore_fields]
        return ignore_fields or ()

    def __repr__(self) -> str:
        return f"OperationBuilder({self.operation_type} {self.name})"


def build_operations(
    type_index: TypeIndex,
    root_name: str,
    ignore_fields: IgnoreFields | None = None,
    operation_type: str = "query",
    max_depth: int = MAX_DEPTH,
    registry: ScalarRegistry = default_registry,
    normalize: bool = True,
) -> dict[str, OperationBuilder]:
    """Create a builder for every field of a root type.

    Field trees and argument specs are resolved eagerly, so schema problems
    surface here rather than when a builder is called.

    Args:
        type_index: Lookup of every schema type by name
        root_name: Name of the query, mutation or subscription root type
        ignore_fields: Paths to exclude, or a function of the root field
            returning them
        operation_type: 'query', 'mutation' or 'subscription'
        max_depth: Nesting depth at which object fields stop expanding

    Returns:
        Builders keyed by root field name

    Raises:
        SchemaResolutionError: If the root type or a referenced type is unknown
    """
    if operation_type not in OPERATION_KEYWORDS:
        raise ValueError(f"Unknown operation type: {operation_type}")

    root = type_index.get(root_name)
    if root is None:
        raise SchemaResolutionError(root_name)

    builders = {}
    for field_def in root.fields:
        return_name = field_def.type.named_type.name
        return_type = type_index.get(return_name)
        if return_type is None:
            raise SchemaResolutionError(return_name, f"{root_name}.{field_def.name}")

        fields = _resolve_return_fields(return_type, type_index, max_depth)
        if fields is None and not return_type.kind.is_leaf:
            logger.warning("Skipping %s: %s return types are not supported",
                           field_def.name, return_type.kind.value)
            continue

        builders[field_def.name] = OperationBuilder(
            field_def,
            operation_type,
            fields,
            extract_arg_specs(field_def.args, type_index, max_depth=max_depth),
            ignore_fields=ignore_fields,
            registry=registry,
            normalize=normalize,
        )
        logger.debug("graphql.get_%s_builder %s", operation_type, field_def.name)

    return builders


def _resolve_return_fields(
    return_type: TypeDef,
    type_index: TypeIndex,
    max_depth: int,
) -> FieldTree | None:
    if not return_type.kind.is_composite:
        return None
    return add_fields_path(resolve_field_tree(return_type, 0, type_index, max_depth))


def get_graphql_builders(
    types: Iterable[TypeDef],
    root_name: str,
    ignore_fields: IgnoreFields | None = None,
    operation_type: str = "query",
    **options: Any,
) -> dict[str, OperationBuilder]:
    """Index ``types`` and create builders for the fields of ``root_name``."""
    return build_operations(
        build_type_index(types), root_name, ignore_fields, operation_type, **options
    )


def get_query_builders(types, root_name, ignore_fields=None, **options):
    return get_graphql_builders(types, root_name, ignore_fields, "query", **options)


def get_mutation_builders(types, root_name, ignore_fields=None, **options):
    return get_graphql_builders(types, root_name, ignore_fields, "mutation", **options)


def get_subscription_builders(types, root_name, ignore_fields=None, **options):
    return get_graphql_builders(types, root_name, ignore_fields, "subscription", **options)


class OperationCatalog:
    """All query, mutation and subscription builders of one schema.

    Example:
        catalog = OperationCatalog(IntrospectionParser("schema.json").parse())
        document = catalog.get("listBlocks")({"paging": {"size": 10}})
    """

    def __init__(
        self,
        schema: IntrospectionSchema,
        ignore_fields: IgnoreFields | None = None,
        **options: Any,
    ):
        self.schema = schema
        self.type_index = build_type_index(schema.types)
        self.queries = self._build(schema.query_type, "query", ignore_fields, options)
        self.mutations = self._build(schema.mutation_type, "mutation", ignore_fields, options)
        self.subscriptions = self._build(
            schema.subscription_type, "subscription", ignore_fields, options
        )

    def _build(
        self,
        root_name: str | None,
        operation_type: str,
        ignore_fields: IgnoreFields | None,
        options: dict[str, Any],
    ) -> dict[str, OperationBuilder]:
        # A schema without this root type simply has no such operations
        if not root_name:
            return {}
        return build_operations(
            self.type_index, root_name, ignore_fields, operation_type, **options
        )

    def get_queries(self) -> list[str]:
        return list(self.queries)

    def get_mutations(self) -> list[str]:
        return list(self.mutations)

    def get_subscriptions(self) -> list[str]:
        return list(self.subscriptions)

    def get(self, name: str, operation_type: str | None = None) -> OperationBuilder:
        """Look up a builder by field name, optionally within one operation type."""
        groups = {
            "query": self.queries,
            "mutation": self.mutations,
            "subscription": self.subscriptions,
        }
        if operation_type is not None:
            groups = {operation_type: groups[operation_type]}
        for builders in groups.values():
            if name in builders:
                return builders[name]
        raise KeyError(f"Unknown operation: {name}")

    def __contains__(self, name: str) -> bool:
        return name in self.queries or name in self.mutations or name in self.subscriptions
