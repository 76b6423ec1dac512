"""Intermediate Representation (IR) for introspected GraphQL schemas.

This module defines dataclasses that mirror the shape of a GraphQL
introspection result (types, fields, arguments, wrapped type references)
plus the structures derived from it when building operations: field trees
and normalized argument specs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Kinds of GraphQL type nodes as reported by introspection."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)

    @property
    def is_leaf(self) -> bool:
        """Leaf kinds are selected without a sub-selection."""
        return self in (TypeKind.SCALAR, TypeKind.ENUM)

    @property
    def is_composite(self) -> bool:
        """Composite kinds with fields that can be expanded into a selection."""
        return self in (TypeKind.OBJECT, TypeKind.INTERFACE)


@dataclass(frozen=True)
class TypeRef:
    """A (possibly wrapped) reference to a named type.

    ``of_type`` models one level of wrapping, so ``[String!]!`` is
    NON_NULL -> LIST -> NON_NULL -> SCALAR(String).
    """
    kind: TypeKind
    name: str | None = None
    of_type: "TypeRef | None" = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeRef":
        of_type = data.get("ofType")
        return cls(
            kind=TypeKind(data["kind"]),
            name=data.get("name"),
            of_type=cls.from_dict(of_type) if of_type else None,
        )

    @property
    def named_type(self) -> "TypeRef":
        """Return the innermost named type, seeing through every wrapper."""
        ref = self
        while ref.kind.is_wrapper and ref.of_type is not None:
            ref = ref.of_type
        return ref

    @property
    def is_non_null(self) -> bool:
        return self.kind == TypeKind.NON_NULL

    @property
    def is_list(self) -> bool:
        ref = self
        while ref is not None:
            if ref.kind == TypeKind.LIST:
                return True
            ref = ref.of_type
        return False

    @property
    def nullable(self) -> "TypeRef":
        """Strip the outermost NON_NULL wrapper, if any."""
        if self.is_non_null and self.of_type is not None:
            return self.of_type
        return self

    def __str__(self) -> str:
        if self.kind == TypeKind.NON_NULL:
            return f"{self.of_type}!"
        if self.kind == TypeKind.LIST:
            return f"[{self.of_type}]"
        return self.name or ""


@dataclass(frozen=True)
class ArgDef:
    """Represents an argument declared on an operation or an input field."""
    name: str
    type: TypeRef
    default_value: Any = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArgDef":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data["type"]),
            default_value=data.get("defaultValue"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class FieldDef:
    """Represents a field declared on an object or interface type."""
    name: str
    type: TypeRef
    args: tuple[ArgDef, ...] = ()
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FieldDef":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data["type"]),
            args=tuple(ArgDef.from_dict(a) for a in data.get("args") or ()),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class TypeDef:
    """Represents a named schema type.

    Object and interface types carry ``fields``, input types carry
    ``input_fields`` and enums carry ``enum_values``.
    """
    name: str
    kind: TypeKind
    fields: tuple[FieldDef, ...] = ()
    input_fields: tuple[ArgDef, ...] = ()
    enum_values: tuple[str, ...] = ()
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeDef":
        return cls(
            name=data["name"],
            kind=TypeKind(data["kind"]),
            fields=tuple(FieldDef.from_dict(f) for f in data.get("fields") or ()),
            input_fields=tuple(ArgDef.from_dict(a) for a in data.get("inputFields") or ()),
            enum_values=tuple(v["name"] for v in data.get("enumValues") or ()),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class IntrospectionSchema:
    """Complete introspection snapshot: every type plus the root type names."""
    types: tuple[TypeDef, ...]
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None

    def root_name(self, operation_type: str) -> str | None:
        """Return the root type name for 'query', 'mutation' or 'subscription'."""
        return {
            "query": self.query_type,
            "mutation": self.mutation_type,
            "subscription": self.subscription_type,
        }[operation_type]


@dataclass
class ScalarField:
    """A leaf entry of a field tree."""
    name: str
    path: str | None = None


@dataclass
class ObjectField:
    """A branch entry of a field tree; ``type`` is the kind of the declared field type."""
    name: str
    type: TypeKind
    fields: "FieldTree"
    path: str | None = None


@dataclass
class FieldTree:
    """Bounded-depth expansion of a composite type into scalars and objects."""
    scalar: list[ScalarField] = field(default_factory=list)
    object: list[ObjectField] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.scalar and not self.object

    def paths(self) -> list[str]:
        """Return every annotated path in the tree, depth first."""
        result = [f.path for f in self.scalar if f.path]
        for obj in self.object:
            if obj.path:
                result.append(obj.path)
            result.extend(obj.fields.paths())
        return result


@dataclass(frozen=True)
class ArgSpec:
    """Normalized description of one argument or input field.

    ``kind`` and ``type_name`` describe the unwrapped named type. ``of``
    holds the element spec for list arguments and ``fields`` the nested
    specs of an input object.
    """
    name: str
    type_name: str | None
    kind: TypeKind
    required: bool = False
    is_list: bool = False
    default_value: Any = None
    of: "ArgSpec | None" = None
    fields: dict[str, "ArgSpec"] | None = None
