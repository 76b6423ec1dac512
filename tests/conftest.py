"""Shared fixtures: a small chain explorer schema in introspection form."""

from pathlib import Path

import pytest
from graphql import (
    FieldNode,
    OperationDefinitionNode,
    build_schema,
    introspection_from_schema,
    parse,
    parse_value,
    print_ast,
)

from gql_opgen.core.ir import ArgDef, TypeRef
from gql_opgen.core.parser import IntrospectionParser
from gql_opgen.core.type_index import build_type_index

DATA_DIR = Path(__file__).parent / "data"
SCHEMA_PATH = DATA_DIR / "schema.graphql"


@pytest.fixture
def schema_path() -> Path:
    return SCHEMA_PATH


@pytest.fixture
def introspection() -> dict:
    """The raw introspection result, as a server would return it."""
    return introspection_from_schema(build_schema(SCHEMA_PATH.read_text()))


@pytest.fixture
def schema(introspection):
    return IntrospectionParser(introspection).parse()


@pytest.fixture
def type_index(schema):
    return build_type_index(schema.types)


@pytest.fixture
def address_height_specs():
    """Argument specs for (address: String!, height: Int)."""
    return {
        "address": ArgDef.from_dict({
            "name": "address",
            "type": {
                "kind": "NON_NULL",
                "name": None,
                "ofType": {"kind": "SCALAR", "name": "String", "ofType": None},
            },
        }),
        "height": ArgDef.from_dict({
            "name": "height",
            "type": {"kind": "SCALAR", "name": "Int", "ofType": None},
        }),
    }


def selected_paths(document: str) -> tuple[set[str], set[str]]:
    """Return (leaf paths, branch paths) selected under the operation's root field."""
    operation = next(
        d for d in parse(document).definitions if isinstance(d, OperationDefinitionNode)
    )
    root = operation.selection_set.selections[0]
    leaves: set[str] = set()
    branches: set[str] = set()

    def walk(node: FieldNode, prefix: str):
        for selection in node.selection_set.selections:
            path = f"{prefix}.{selection.name.value}" if prefix else selection.name.value
            if selection.selection_set:
                branches.add(path)
                walk(selection, path)
            else:
                leaves.add(path)

    if root.selection_set:
        walk(root, "")
    return leaves, branches


def named(kind: str, name: str) -> TypeRef:
    return TypeRef.from_dict({"kind": kind, "name": name, "ofType": None})


def root_arguments(document: str) -> dict[str, str]:
    """Return the printed argument values of the operation's root field."""
    operation = next(
        d for d in parse(document).definitions if isinstance(d, OperationDefinitionNode)
    )
    root = operation.selection_set.selections[0]
    return {arg.name.value: print_ast(arg.value) for arg in root.arguments}


def literal(text: str) -> str:
    """Print a GraphQL value literal the same way documents are printed."""
    return print_ast(parse_value(text))
