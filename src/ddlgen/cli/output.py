"""Output formatting for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ddlgen.core.types import EntitySummary
from ddlgen.exceptions import DDLGenError

console = Console()


class OutputFormatter:
    """Formats output for terminal or JSON mode."""

    def __init__(self, json_mode: bool = False) -> None:
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode

    def print_table(
        self,
        title: str,
        data: list[dict[str, Any]],
        columns: list[str],
    ) -> None:
        """Print data as Rich table or JSON array.

        Args:
            title: Table title
            data: List of row dictionaries
            columns: Column names to display
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            table = Table(title=title, show_header=True, header_style="bold magenta")
            for col in columns:
                table.add_column(col)
            for row in data:
                table.add_row(*[str(row.get(col, "")) for col in columns])
            console.print(table)

    def print_entities(self, model_name: str, entities: list[EntitySummary]) -> None:
        """Print key summaries and resolved foreign keys of a model.

        Args:
            model_name: Name of the data model
            entities: One summary per entity, in model order
        """
        if self.json_mode:
            print(
                json.dumps(
                    {"model": model_name, "entities": [e.model_dump() for e in entities]},
                    indent=2,
                )
            )
            return

        console.print(f"\n[bold]Model:[/bold] {model_name}")
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Entity")
        table.add_column("Columns")
        table.add_column("Primary Key")
        table.add_column("Unique")
        table.add_column("Foreign Keys")
        for entity in entities:
            table.add_row(
                entity.name,
                str(entity.columns),
                ", ".join(entity.primary_keys),
                ", ".join(entity.unique),
                str(len(entity.foreign_keys)),
            )
        console.print(table)

        constraints = [(e.name, fk) for e in entities for fk in e.foreign_keys]
        if constraints:
            console.print(f"\n[bold]Foreign keys ({len(constraints)}):[/bold]")
            for name, fk in constraints:
                console.print(
                    f"  {name}({', '.join(fk.columns)}) -> "
                    f"{fk.target_table}({', '.join(fk.target_columns)})"
                )

    def print_success(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Print success message.

        Args:
            message: Success message
            details: Optional details to display
        """
        if self.json_mode:
            output = {"success": True, "message": message}
            if details:
                output.update(details)
            print(json.dumps(output, default=str, indent=2))
        else:
            console.print(f"✓ {message}", style="green")
            if details:
                for key, value in details.items():
                    console.print(f"  {key}: {value}", style="dim")

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if self.json_mode:
            if isinstance(error, DDLGenError):
                print(json.dumps(error.to_dict(), default=str, indent=2))
            else:
                print(json.dumps({"error": str(error)}, indent=2))
        else:
            error_text = str(error)
            if isinstance(error, DDLGenError) and error.context:
                context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
                error_text = f"{error_text}\n\n{context_str}"

            panel = Panel(
                error_text,
                title="[red]Error[/red]",
                border_style="red",
            )
            console.print(panel)
