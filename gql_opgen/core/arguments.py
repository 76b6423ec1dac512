"""Argument specs and argument-list rendering for GraphQL operations.

Turns declared operation arguments into normalized specs, and call-time
values into the ``name: literal, ...`` text placed between the parentheses
of an operation field.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import (
    ArgumentValidationError,
    MissingArguments,
    MissingRequiredArgument,
    SchemaResolutionError,
)
from .field_tree import MAX_DEPTH
from .ir import ArgDef, ArgSpec, TypeDef, TypeKind, TypeRef
from .scalars import ScalarRegistry, default_registry
from .type_index import TypeIndex

logger = logging.getLogger(__name__)


def extract_arg_specs(
    args: Iterable[ArgDef],
    type_index: TypeIndex,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
) -> dict[str, ArgSpec]:
    """Normalize declared arguments, expanding input objects recursively.

    Input object fields are expanded until ``max_depth``; deeper input
    objects get an empty ``fields`` mapping.

    Raises:
        SchemaResolutionError: If an input type is missing from the index
    """
    return {
        a.name: _arg_spec(a.name, a.type, a.default_value, type_index, depth, max_depth)
        for a in args
    }


def _arg_spec(
    name: str,
    type_ref: TypeRef,
    default_value: Any,
    type_index: TypeIndex,
    depth: int,
    max_depth: int,
) -> ArgSpec:
    required = type_ref.is_non_null
    inner = type_ref.nullable

    if inner.kind == TypeKind.LIST:
        named = inner.named_type
        return ArgSpec(
            name=name,
            type_name=named.name,
            kind=named.kind,
            required=required,
            is_list=True,
            default_value=default_value,
            of=_arg_spec(name, inner.of_type, None, type_index, depth, max_depth),
        )

    fields = None
    if inner.kind == TypeKind.INPUT_OBJECT:
        input_type = type_index.get(inner.name)
        if input_type is None:
            raise SchemaResolutionError(inner.name, name)
        fields = {}
        if depth < max_depth:
            fields = extract_arg_specs(input_type.input_fields, type_index, depth + 1, max_depth)

    return ArgSpec(
        name=name,
        type_name=inner.name,
        kind=inner.kind,
        required=required,
        default_value=default_value,
        fields=fields,
    )


def to_literal(value: Any) -> str:
    """Render a Python value as a GraphQL literal.

    Object keys are written as barewords, strings are quoted and Python
    ``Enum`` members become bare enum names. Without a spec plain strings
    are always quoted, so enum values must be passed as ``Enum`` members.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Mapping):
        items = ", ".join(f"{k}: {to_literal(v)}" for k, v in value.items())
        return f"{{{items}}}"
    if isinstance(value, (list, tuple, set)):
        return f"[{', '.join(to_literal(v) for v in value)}]"
    if isinstance(value, (datetime, date)):
        value = value.isoformat()
    return json.dumps(str(value), ensure_ascii=False)


def _enum_literal(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _spec_literal(spec: ArgSpec, value: Any, registry: ScalarRegistry, path: str) -> str:
    """Render a value following its argument spec.

    Scalars go through the registry, enum values are written bare and the
    non-null fields of input objects are checked. Keys the spec does not
    know fall back to ``to_literal``.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)
    if value is None:
        return "null"

    if spec.is_list:
        if isinstance(value, (list, tuple, set)):
            return f"[{', '.join(_spec_literal(spec.of, v, registry, path) for v in value)}]"
        # A single value is accepted where a list is expected
        return _spec_literal(spec.of, value, registry, path)

    if spec.kind == TypeKind.ENUM:
        return _enum_literal(value)
    if spec.kind == TypeKind.SCALAR:
        return registry.get(spec.type_name).to_literal(value)

    if spec.kind == TypeKind.INPUT_OBJECT and spec.fields and isinstance(value, Mapping):
        missing = [
            f"{path}.{name}"
            for name, field in spec.fields.items()
            if field.required and value.get(name) is None
        ]
        if missing:
            raise MissingRequiredArgument(missing)

        items = []
        for key, item in value.items():
            field = spec.fields.get(key)
            if field is None:
                items.append(f"{key}: {to_literal(item)}")
            else:
                items.append(f"{key}: {_spec_literal(field, item, registry, f'{path}.{key}')}")
        return f"{{{', '.join(items)}}}"

    return to_literal(value)


def _render_value(arg: ArgDef, value: Any, registry: ScalarRegistry) -> str:
    type_ref = arg.type.nullable
    if type_ref.kind in (TypeKind.LIST, TypeKind.INPUT_OBJECT):
        return to_literal(value)
    if type_ref.kind == TypeKind.SCALAR:
        return registry.get(type_ref.name).to_literal(value)
    if type_ref.kind == TypeKind.ENUM:
        return _enum_literal(value)
    raise ArgumentValidationError(f"Argument '{arg.name}' has non-input type {arg.type}")


def format_args(
    values: Mapping[str, Any] | BaseModel | None,
    specs: Mapping[str, ArgDef] | None = None,
    registry: ScalarRegistry = default_registry,
    arg_specs: Mapping[str, ArgSpec] | None = None,
) -> str:
    """Build the argument list for an operation call.

    Args:
        values: Call-time argument values
        specs: Declared arguments keyed by name
        registry: Literal handlers for scalar arguments
        arg_specs: Normalized specs from ``extract_arg_specs``; when given,
            list and input object values are rendered field by field

    Returns:
        Text such as ``address: "xxx", height: 123``

    Raises:
        MissingArguments: If ``values`` is None or otherwise falsy
        MissingRequiredArgument: If a non-null argument is absent or falsy,
            or a non-null input object field is absent
    """
    arg_specs = arg_specs or {}
    specs = specs or {}
    if isinstance(values, BaseModel):
        values = values.model_dump(by_alias=True, exclude_none=True)
    # An empty mapping still counts as input; its missing keys are checked below.
    if not isinstance(values, Mapping):
        if not values:
            raise MissingArguments()
        raise ArgumentValidationError(
            f"Expected a mapping of argument values, got {type(values).__name__}"
        )

    missing = [name for name, arg in specs.items() if arg.type.is_non_null and not values.get(name)]
    if missing:
        raise MissingRequiredArgument(missing)

    # Only declared arguments are sent; anything else is dropped, not rejected.
    unknown = [name for name in values if name not in specs]
    if unknown:
        logger.debug("Dropping undeclared arguments: %s", ", ".join(unknown))

    # None values are skipped
    rendered = []
    for name, value in values.items():
        if name not in specs or value is None:
            continue
        spec = arg_specs.get(name)
        if spec is not None and (spec.is_list or spec.kind == TypeKind.INPUT_OBJECT):
            literal = _spec_literal(spec, value, registry, name)
        else:
            literal = _render_value(specs[name], value, registry)
        rendered.append(f"{name}: {literal}")
    return ", ".join(rendered)


def random_args(
    type_def: TypeDef,
    type_index: TypeIndex,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
    registry: ScalarRegistry = default_registry,
) -> dict[str, Any]:
    """Generate sample values for every field of an input type.

    Useful for smoke-testing builders: strings become ``"abc"``, numbers
    ``123``, lists hold a single sample element and enums take their first
    declared value.
    """
    return sample_args(type_def.input_fields, type_index, depth, max_depth, registry)


def sample_args(
    args: Iterable[ArgDef],
    type_index: TypeIndex,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
    registry: ScalarRegistry = default_registry,
) -> dict[str, Any]:
    """Generate sample values for a list of declared arguments."""
    return {
        a.name: _sample_value(a.type, type_index, depth, max_depth, registry)
        for a in args
    }


def _sample_value(
    type_ref: TypeRef,
    type_index: TypeIndex,
    depth: int,
    max_depth: int,
    registry: ScalarRegistry,
) -> Any:
    type_ref = type_ref.nullable
    if type_ref.kind == TypeKind.LIST:
        return [_sample_value(type_ref.of_type, type_index, depth, max_depth, registry)]

    if type_ref.kind == TypeKind.SCALAR:
        if registry.is_string_kind(type_ref.name):
            return "abc"
        if type_ref.name == "Boolean":
            return True
        return 123

    named = type_index.get(type_ref.name)
    if named is None:
        raise SchemaResolutionError(type_ref.name)
    if type_ref.kind == TypeKind.ENUM:
        return named.enum_values[0] if named.enum_values else None
    if depth >= max_depth:
        return {}
    return random_args(named, type_index, depth + 1, max_depth, registry)
