#!/usr/bin/env python3
"""Demonstration of schema-driven operation builders.

This script shows how to:
1. Load a GraphQL schema
2. Build query and mutation builders for every root field
3. Render documents with arguments and field exclusions

Note: This demo doesn't make real API calls - it just demonstrates
the document generation capabilities.
"""

import sys
from pathlib import Path

from gql_opgen.core import IntrospectionParser, OperationCatalog, sample_args


def main():
    # Path to an SDL file or a saved introspection result
    if len(sys.argv) > 1:
        schema_path = Path(sys.argv[1])
    else:
        schema_path = Path(__file__).parent.parent / "tests" / "data" / "schema.graphql"

    if not schema_path.exists():
        print(f"Schema not found at {schema_path}")
        return

    print("=== Operation Builder Demo ===\n")

    print("1. Loading schema...")
    schema = IntrospectionParser(schema_path).parse()
    print(f"   {len(schema.types)} types")

    print("\n2. Creating builders...")
    catalog = OperationCatalog(schema)
    print(f"   Queries: {', '.join(catalog.get_queries())}")
    print(f"   Mutations: {', '.join(catalog.get_mutations())}")
    print(f"   Subscriptions: {', '.join(catalog.get_subscriptions())}")

    name = catalog.get_queries()[0]
    builder = catalog.get(name)
    print(f"\n3. Example: {name}")
    print("   Arguments:")
    for arg_name, spec in builder.arg_specs.items():
        req = " (required)" if spec.required else ""
        print(f"     - {arg_name}: {builder.args[arg_name].type}{req}")

    values = sample_args(builder.field.args, catalog.type_index)
    print(f"\n   === Full document for {values} ===")
    document = builder(values)
    lines = document.split("\n")
    print("\n".join(lines[:20]))
    print(f"   ... ({len(lines)} total lines)")

    top_level = [f.path for f in builder.fields.object] if builder.fields else []
    print(f"\n   === Same document without {top_level} ===")
    print(builder(values, ignore_fields=top_level))

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
