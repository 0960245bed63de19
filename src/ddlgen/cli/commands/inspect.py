"""Model inspection command."""

from typing import Annotated

import typer

from ddlgen.cli.context import CLIContext
from ddlgen.cli.output import OutputFormatter
from ddlgen.ddl.resolver import describe_keys
from ddlgen.schema.loader import load_model


def inspect_command(
    ctx: typer.Context,
    model_file: Annotated[str, typer.Argument(help="Data model JSON file")],
) -> None:
    """Show the keys of every entity and the foreign keys that would be generated."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        model = load_model(model_file)
        formatter.print_entities(model.name, describe_keys(model))
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
