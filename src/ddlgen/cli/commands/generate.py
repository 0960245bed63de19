"""DDL generation command."""

from pathlib import Path
from typing import Annotated

import typer

from ddlgen.cli.context import CLIContext, get_preferences_path
from ddlgen.cli.output import OutputFormatter
from ddlgen.core.types import Dialect, FileExtension
from ddlgen.ddl.generator import DDLGenerator
from ddlgen.preferences import resolve_options
from ddlgen.schema.loader import load_model


def generate_command(
    ctx: typer.Context,
    model_file: Annotated[str, typer.Argument(help="Data model JSON file")],
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: <model name><extension> in the current directory)",
        ),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the DDL instead of writing a file"),
    ] = False,
    dbms: Annotated[
        Dialect | None,
        typer.Option("--dbms", help="Target DBMS"),
    ] = None,
    quote: Annotated[
        bool | None,
        typer.Option("--quote/--no-quote", help="Quote identifiers"),
    ] = None,
    drop: Annotated[
        bool | None,
        typer.Option("--drop/--no-drop", help="Drop tables before create"),
    ] = None,
    use_tab: Annotated[
        bool | None,
        typer.Option("--use-tab/--use-spaces", help="Indent with tabs or spaces"),
    ] = None,
    indent_spaces: Annotated[
        int | None,
        typer.Option("--indent-spaces", min=0, help="Number of spaces for indentation"),
    ] = None,
    extension: Annotated[
        FileExtension | None,
        typer.Option("--extension", help="Suffix of the default output file"),
    ] = None,
    preferences: Annotated[
        str | None,
        typer.Option(
            "--preferences",
            "-p",
            help="JSON preferences file with ddl.gen.* keys (default: $DDLGEN_PREFERENCES)",
        ),
    ] = None,
) -> None:
    """Generate a DDL script from a data model.

    Examples:

        ddlgen generate shop.json

        ddlgen generate shop.json --dbms oracle --no-drop -o schema/shop.ddl

        ddlgen generate shop.json --no-quote --stdout
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        model = load_model(model_file)
        options, _ = resolve_options(
            {
                "ddl.gen.dbms": dbms,
                "ddl.gen.quoteIdentifiers": quote,
                "ddl.gen.dropTable": drop,
                "ddl.gen.useTab": use_tab,
                "ddl.gen.indentSpaces": indent_spaces,
                "ddl.gen.fileExtension": extension,
            },
            preferences_file=get_preferences_path(preferences),
        )
        generator = DDLGenerator(options)

        if stdout:
            typer.echo(generator.generate_text(model) or "", nl=False)
            return

        path = Path(output) if output else Path(f"{model.name}{options.file_extension}")
        result = generator.generate(model, path)
        formatter.print_success(f"DDL written to {result.path}", result.model_dump())
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
