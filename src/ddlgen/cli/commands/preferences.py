"""Preferences command."""

from typing import Annotated

import typer

from ddlgen.cli.context import CLIContext, get_preferences_path
from ddlgen.cli.output import OutputFormatter
from ddlgen.preferences import OPTION_KEYS, PREFERENCE_SCHEMA, resolve_options


def preferences_command(
    ctx: typer.Context,
    preferences: Annotated[
        str | None,
        typer.Option(
            "--preferences",
            "-p",
            help="JSON preferences file with ddl.gen.* keys (default: $DDLGEN_PREFERENCES)",
        ),
    ] = None,
) -> None:
    """Show the effective DDL generation options and where each comes from."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        options, sources = resolve_options(preferences_file=get_preferences_path(preferences))
        values = options.model_dump(mode="json")
        rows = [
            {
                "Key": key,
                "Description": PREFERENCE_SCHEMA[key]["description"],
                "Value": values[field_name],
                "Source": sources[key],
            }
            for key, (field_name, _) in OPTION_KEYS.items()
        ]
        formatter.print_table("DDL Generation", rows, ["Key", "Description", "Value", "Source"])
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
