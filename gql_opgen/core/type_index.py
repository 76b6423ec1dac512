"""Name -> type lookup built from an introspection snapshot."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .ir import TypeDef

INTROSPECTION_PREFIX = "__"

TypeIndex = Mapping[str, TypeDef]


def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith(INTROSPECTION_PREFIX)


def build_type_index(types: Iterable[TypeDef]) -> TypeIndex:
    """Index every schema type by name, leaving out the ``__`` meta-types."""
    return MappingProxyType({t.name: t for t in types if not is_introspection_type(t.name)})
