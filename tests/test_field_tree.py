"""Tests for the type index, field tree resolver and path annotator."""

import pytest

from conftest import named
from gql_opgen.core.errors import SchemaResolutionError
from gql_opgen.core.field_tree import MAX_DEPTH, add_fields_path, resolve_field_tree
from gql_opgen.core.ir import FieldDef, FieldTree, ObjectField, ScalarField, TypeDef, TypeKind
from gql_opgen.core.type_index import build_type_index


def _cyclic_types():
    """Node { id, label, parent: Node, children: [Node!]! }"""
    node_ref = named("OBJECT", "Node")
    return [
        TypeDef(
            name="Node",
            kind=TypeKind.OBJECT,
            fields=(
                FieldDef("id", named("SCALAR", "ID")),
                FieldDef("label", named("SCALAR", "String")),
                FieldDef("parent", node_ref),
            ),
        ),
        TypeDef(name="ID", kind=TypeKind.SCALAR),
        TypeDef(name="String", kind=TypeKind.SCALAR),
        TypeDef(name="__Schema", kind=TypeKind.OBJECT),
    ]


def _max_depth(tree: FieldTree, depth: int = 0) -> int:
    return max([depth] + [_max_depth(o.fields, depth + 1) for o in tree.object])


class TestBuildTypeIndex:
    """Tests for build_type_index."""

    def test_excludes_introspection_types(self, type_index):
        assert type_index
        assert not [name for name in type_index if name.startswith("__")]

    def test_indexes_schema_types(self, type_index):
        assert type_index["Transaction"].kind == TypeKind.OBJECT
        assert type_index["PageInput"].kind == TypeKind.INPUT_OBJECT
        assert type_index["Direction"].enum_values == ("UNION", "MUTUAL", "ONE_WAY")

    def test_empty_input(self):
        assert dict(build_type_index([])) == {}

    def test_index_is_read_only(self):
        index = build_type_index(_cyclic_types())
        with pytest.raises(TypeError):
            index["Other"] = index["Node"]


class TestResolveFieldTree:
    """Tests for resolve_field_tree."""

    def test_scalars_and_objects_are_split(self, type_index):
        tree = resolve_field_tree(type_index["ResponseGetBlock"], 0, type_index)
        assert [f.name for f in tree.scalar] == ["code"]
        assert [f.name for f in tree.object] == ["block"]
        block = tree.object[0]
        assert [f.name for f in block.fields.scalar] == ["height", "hash", "time", "numTxs", "proposer"]
        assert [f.name for f in block.fields.object] == ["txs"]

    def test_enum_fields_are_leaves(self, type_index):
        tree = resolve_field_tree(type_index["Transaction"], 0, type_index)
        assert "code" in [f.name for f in tree.scalar]

    def test_wrapped_object_fields_are_expanded(self, type_index):
        # transactions: [Transaction!]!
        tree = resolve_field_tree(type_index["ResponseListTransactions"], 0, type_index)
        transactions = next(o for o in tree.object if o.name == "transactions")
        assert transactions.type == TypeKind.NON_NULL
        assert "hash" in [f.name for f in transactions.fields.scalar]

    def test_union_fields_are_skipped(self, type_index):
        tree = resolve_field_tree(type_index["ResponseGetAccountState"], 0, type_index)
        assert [f.name for f in tree.scalar] == ["code"]
        assert [f.name for f in tree.object] == ["state"]

    def test_cyclic_types_terminate_at_depth_bound(self):
        index = build_type_index(_cyclic_types())
        tree = resolve_field_tree(index["Node"], 0, index)
        assert _max_depth(tree) == MAX_DEPTH

        deepest = tree
        for _ in range(MAX_DEPTH):
            deepest = deepest.object[0].fields
        assert [f.name for f in deepest.scalar] == ["id", "label"]
        assert deepest.object == []

    def test_at_bound_only_scalars_are_returned(self, type_index):
        tree = resolve_field_tree(type_index["Transaction"], MAX_DEPTH, type_index)
        assert tree.object == []
        assert "parent" not in [f.name for f in tree.scalar]

    def test_custom_depth_bound(self):
        index = build_type_index(_cyclic_types())
        tree = resolve_field_tree(index["Node"], 0, index, max_depth=1)
        assert _max_depth(tree) == 1

    def test_unknown_type_fails_fast(self):
        types = [
            TypeDef(
                name="Query",
                kind=TypeKind.OBJECT,
                fields=(FieldDef("wallet", named("OBJECT", "Wallet")),),
            )
        ]
        index = build_type_index(types)
        with pytest.raises(SchemaResolutionError) as exc_info:
            resolve_field_tree(index["Query"], 0, index)
        assert exc_info.value.type_name == "Wallet"
        assert "Query.wallet" in str(exc_info.value)

    def test_empty_names_are_dropped(self):
        type_def = TypeDef(
            name="Odd",
            kind=TypeKind.OBJECT,
            fields=(FieldDef("", named("SCALAR", "String")), FieldDef("ok", named("SCALAR", "String"))),
        )
        tree = resolve_field_tree(type_def, MAX_DEPTH, build_type_index([type_def]))
        assert [f.name for f in tree.scalar] == ["ok"]


class TestAddFieldsPath:
    """Tests for add_fields_path."""

    def test_root_fields_have_no_leading_dot(self):
        tree = add_fields_path(FieldTree(scalar=[ScalarField("code")]))
        assert tree.scalar[0].path == "code"

    def test_nested_paths(self, type_index):
        tree = add_fields_path(resolve_field_tree(type_index["ResponseGetBlock"], 0, type_index))
        block = tree.object[0]
        assert block.path == "block"
        assert block.fields.scalar[0].path == "block.height"
        txs = block.fields.object[0]
        assert txs.path == "block.txs"
        assert "block.txs.hash" in [f.path for f in txs.fields.scalar]

    def test_prefix(self):
        tree = FieldTree(
            scalar=[ScalarField("a")],
            object=[ObjectField("b", TypeKind.OBJECT, FieldTree(scalar=[ScalarField("c")]))],
        )
        annotated = add_fields_path(tree, "root")
        assert annotated.paths() == ["root.a", "root.b", "root.b.c"]

    def test_does_not_mutate_input(self):
        tree = FieldTree(scalar=[ScalarField("a")])
        add_fields_path(tree)
        assert tree.scalar[0].path is None

    def test_idempotent(self, type_index):
        tree = add_fields_path(resolve_field_tree(type_index["ResponseListTransactions"], 0, type_index))
        assert add_fields_path(tree).paths() == tree.paths()
