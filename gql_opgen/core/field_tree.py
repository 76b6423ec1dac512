"""Schema-driven expansion of a return type into a bounded-depth field tree."""

import logging

from .errors import SchemaResolutionError
from .ir import FieldDef, FieldTree, ObjectField, ScalarField, TypeDef, TypeKind
from .type_index import TypeIndex

logger = logging.getLogger(__name__)

# Object fields below this depth are not expanded, which keeps cyclic
# references such as Transaction.parent.parent... finite.
MAX_DEPTH = 4


def _field_kind(field_def: FieldDef) -> TypeKind:
    return field_def.type.named_type.kind


def resolve_field_tree(
    type_def: TypeDef,
    depth: int,
    type_index: TypeIndex,
    max_depth: int = MAX_DEPTH,
) -> FieldTree:
    """Expand the fields of ``type_def`` into scalar leaves and object branches.

    Args:
        type_def: The object or interface type to expand
        depth: Nesting level of ``type_def``; the root return type is 0
        type_index: Lookup used to resolve nested object types
        max_depth: Depth at which object fields stop being expanded

    Returns:
        The field tree, without paths (see ``add_fields_path``)

    Raises:
        SchemaResolutionError: If a nested type is missing from the index
    """
    scalar_fields = [
        ScalarField(name=f.name)
        for f in type_def.fields
        if f.name and _field_kind(f).is_leaf
    ]

    if depth >= max_depth:
        return FieldTree(scalar=scalar_fields)

    object_fields = []
    for f in type_def.fields:
        kind = _field_kind(f)
        if kind == TypeKind.UNION:
            logger.debug("Skipping union field %s.%s", type_def.name, f.name)
            continue
        if not kind.is_composite:
            continue

        sub_type_name = f.type.named_type.name
        sub_type = type_index.get(sub_type_name)
        if sub_type is None:
            raise SchemaResolutionError(sub_type_name, f"{type_def.name}.{f.name}")

        object_fields.append(
            ObjectField(
                name=f.name,
                type=f.type.kind,
                fields=resolve_field_tree(sub_type, depth + 1, type_index, max_depth),
            )
        )

    return FieldTree(scalar=scalar_fields, object=object_fields)


def _join_path(prefix: str, name: str) -> str:
    return ".".join(part for part in (prefix, name) if part)


def add_fields_path(fields: FieldTree, prefix: str = "") -> FieldTree:
    """Return a copy of ``fields`` where every entry carries its dotted path."""
    return FieldTree(
        scalar=[
            ScalarField(name=f.name, path=_join_path(prefix, f.name))
            for f in fields.scalar
        ],
        object=[
            ObjectField(
                name=f.name,
                type=f.type,
                path=_join_path(prefix, f.name),
                fields=add_fields_path(f.fields, _join_path(prefix, f.name)),
            )
            for f in fields.object
        ],
    )
