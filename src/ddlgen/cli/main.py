"""ddlgen CLI - Main entry point."""

from typing import Annotated

import typer

import ddlgen
from ddlgen.cli.context import CLIContext, configure_logging

# Create main Typer app
app = typer.Typer(
    name="ddlgen",
    help="ddlgen CLI - Generate SQL DDL scripts from ER data models",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log key resolution details to stderr",
        ),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    configure_logging(verbose)
    ctx.obj = CLIContext(json_output=json_output, verbose=verbose)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"ddlgen v{ddlgen.__version__}")


# Register commands
from ddlgen.cli.commands import generate, inspect, preferences

app.command(name="generate")(generate.generate_command)
app.command(name="inspect")(inspect.inspect_command)
app.command(name="preferences")(preferences.preferences_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
