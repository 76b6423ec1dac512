"""Introspection loader using graphql-core.

Reads an introspection result (in memory or from a JSON file) or an SDL
schema file and produces an IntrospectionSchema.
"""

import json
import logging
import os
from typing import Any

from graphql import GraphQLError, GraphQLSchema, build_schema, introspection_from_schema

from .errors import SchemaLoadError
from .ir import IntrospectionSchema, TypeDef

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


class IntrospectionParser:
    """Parses introspection data into IR."""

    def __init__(self, source: str | os.PathLike | dict[str, Any]):
        """Initialize a parser with an introspection dict or a path to a schema file."""
        self.source = source

    def parse(self) -> IntrospectionSchema:
        """Load the source and return the complete IR."""
        if isinstance(self.source, dict):
            data = self.source
        else:
            data = self._load_file(os.fspath(self.source))
        return self.from_introspection(data)

    @classmethod
    def from_introspection(cls, data: dict[str, Any]) -> IntrospectionSchema:
        """Build the IR from any common introspection envelope."""
        schema = cls._unwrap(data)
        types = schema.get("types")
        if not isinstance(types, list):
            raise SchemaLoadError("Introspection result has no 'types' list")

        try:
            type_defs = tuple(TypeDef.from_dict(t) for t in types)
        except (KeyError, TypeError, ValueError) as e:
            raise SchemaLoadError(f"Malformed introspection type: {e}") from e

        logger.debug("Parsed %d introspection types", len(type_defs))
        return IntrospectionSchema(
            types=type_defs,
            query_type=cls._root_name(schema, "queryType"),
            mutation_type=cls._root_name(schema, "mutationType"),
            subscription_type=cls._root_name(schema, "subscriptionType"),
        )

    @classmethod
    def from_sdl(cls, sdl: str) -> IntrospectionSchema:
        """Build the IR from schema definition language text."""
        schema = cls._build_sdl(sdl, "<sdl>")
        return cls.from_introspection(introspection_from_schema(schema))

    def _load_file(self, path: str) -> dict[str, Any]:
        if not os.path.isfile(path):
            raise SchemaLoadError(f"Schema file not found: {path}")

        with open(path) as f:
            content = f.read()

        if path.endswith(SDL_SUFFIXES):
            return introspection_from_schema(self._build_sdl(content, path))

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Error parsing {os.path.basename(path)}: {e}") from e

    @staticmethod
    def _build_sdl(content: str, label: str) -> GraphQLSchema:
        try:
            return build_schema(content)
        except GraphQLError as e:
            raise SchemaLoadError(f"Error parsing {os.path.basename(label)}: {e}") from e

    @staticmethod
    def _unwrap(data: dict[str, Any]) -> dict[str, Any]:
        """Accept {"data": {"__schema": ...}}, {"__schema": ...} or the bare schema."""
        if not isinstance(data, dict):
            raise SchemaLoadError(f"Expected an introspection object, got {type(data).__name__}")
        if isinstance(data.get("data"), dict):
            data = data["data"]
        return data.get("__schema", data)

    @staticmethod
    def _root_name(schema: dict[str, Any], key: str) -> str | None:
        root = schema.get(key)
        return root.get("name") if root else None
