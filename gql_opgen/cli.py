"""Command-line interface for gql-opgen."""

import json
import logging

import click
from graphql import GraphQLError

from .core.arguments import sample_args
from .core.errors import OpGenError
from .core.parser import IntrospectionParser
from .core.query_builder import OperationCatalog

OPERATION_TYPES = ("query", "mutation", "subscription")

schema_option = click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to an introspection result (.json) or an SDL schema (.graphql, .graphqls).",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)


def load_catalog(schema: str, verbose: bool) -> OperationCatalog:
    """Parse the schema file and build every operation, reporting errors to the user."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    try:
        return OperationCatalog(IntrospectionParser(schema).parse())
    except OpGenError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="gql-opgen")
def main():
    """Build GraphQL operation documents from an introspected schema."""
    pass


@main.command()
@schema_option
@click.option(
    "--type",
    "-t",
    "operation_types",
    multiple=True,
    type=click.Choice(OPERATION_TYPES),
    help="Only list operations of this type (repeatable).",
)
@verbose_option
def operations(schema: str, operation_types: tuple[str, ...], verbose: bool):
    """List the operations of a schema and their arguments.

    Required arguments are marked with '!'.

    Examples:

        gql-opgen operations --schema ./schema.json

        gql-opgen operations -s ./schema.graphql -t mutation
    """
    catalog = load_catalog(schema, verbose)
    groups = {
        "query": catalog.queries,
        "mutation": catalog.mutations,
        "subscription": catalog.subscriptions,
    }

    for operation_type in operation_types or OPERATION_TYPES:
        for name, builder in groups[operation_type].items():
            args = ", ".join(
                f"{arg_name}: {arg.type}" for arg_name, arg in builder.args.items()
            )
            click.echo(f"{operation_type} {name}({args})")


@main.command()
@schema_option
@click.argument("name")
@click.option(
    "--args",
    "-a",
    "args_json",
    default=None,
    help="Argument values as a JSON object.",
)
@click.option(
    "--sample",
    is_flag=True,
    help="Fill every argument with generated sample values.",
)
@click.option(
    "--ignore",
    "-i",
    "ignore_fields",
    multiple=True,
    help="Dotted field path to leave out of the selection (repeatable).",
)
@verbose_option
def render(
    schema: str,
    name: str,
    args_json: str | None,
    sample: bool,
    ignore_fields: tuple[str, ...],
    verbose: bool,
):
    """Print the document for one operation.

    Examples:

        gql-opgen render -s ./schema.json getBlock --args '{"height": 10}'

        gql-opgen render -s ./schema.json listTransactions --sample -i code
    """
    catalog = load_catalog(schema, verbose)

    try:
        builder = catalog.get(name)
    except KeyError as e:
        raise click.ClickException(f"Unknown operation: {name}") from e

    if sample:
        values = sample_args(builder.field.args, catalog.type_index)
    elif args_json:
        try:
            values = json.loads(args_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--args") from e
    else:
        values = None

    try:
        document = builder(values, ignore_fields=list(ignore_fields) or None)
    except (OpGenError, GraphQLError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(document)


if __name__ == "__main__":
    main()
