"""DDL script generation from a data model.

The script has three sections, each walking the entities in model order:

1. optional DROP TABLE statements (wrapped in FOREIGN_KEY_CHECKS toggles on
   MySQL),
2. one CREATE TABLE block per entity with its PRIMARY KEY and UNIQUE lines,
3. ALTER TABLE ... ADD FOREIGN KEY statements for every resolved constraint.

Foreign keys come last so that tables may reference tables created later
in the script. The whole text is built in memory before anything is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ddlgen.core.types import Dialect, GenerationOptions, GenerationResult
from ddlgen.ddl.formatter import (
    format_column,
    format_identifier,
    get_indent_string,
    is_reserved_word,
)
from ddlgen.ddl.resolver import (
    ForeignKeyConstraint,
    primary_keys,
    resolve_foreign_keys,
    unique_columns,
)
from ddlgen.ddl.writer import CodeWriter
from ddlgen.exceptions import DDLWriteError
from ddlgen.schema.models import DataModel, Entity, ModelNode, NodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDDL:
    """Generated script text with statistics."""

    text: str
    tables: int
    foreign_keys: int


class DDLGenerator:
    """Generates a DDL script for a data model.

    The generator keeps only its options and never mutates the model, so one
    instance can serve any number of runs.
    """

    def __init__(self, options: GenerationOptions | None = None) -> None:
        """Initialize the generator.

        Args:
            options: Emission options (defaults when omitted)
        """
        self.options = options or GenerationOptions()

    def get_id(self, name: str) -> str:
        """Format an identifier according to the options."""
        return format_identifier(name, self.options.quote_identifiers, self.options.dbms)

    def _check_reserved(self, name: str) -> None:
        if not self.options.quote_identifiers and is_reserved_word(name, self.options.dbms):
            logger.warning(
                "'%s' is a reserved word in %s; enable identifier quoting",
                name,
                self.options.dbms,
            )

    def write_drop_table(self, writer: CodeWriter, entity: Entity) -> None:
        if self.options.dbms == Dialect.MYSQL:
            writer.write_line(f"DROP TABLE IF EXISTS {self.get_id(entity.name)};")
        elif self.options.dbms == Dialect.ORACLE:
            writer.write_line(f"DROP TABLE {self.get_id(entity.name)} CASCADE CONSTRAINTS;")

    def write_drop_tables(self, writer: CodeWriter, model: DataModel) -> None:
        """Write the drop section, followed by a blank line."""
        if self.options.dbms == Dialect.MYSQL:
            writer.write_line("SET FOREIGN_KEY_CHECKS = 0;")
        for entity in model.entities:
            self.write_drop_table(writer, entity)
        if self.options.dbms == Dialect.MYSQL:
            writer.write_line("SET FOREIGN_KEY_CHECKS = 1;")
        writer.write_line()

    def write_table(self, writer: CodeWriter, entity: Entity) -> None:
        """Write the CREATE TABLE block of one entity."""
        self._check_reserved(entity.name)
        writer.write_line(f"CREATE TABLE {self.get_id(entity.name)} (")
        writer.indent()

        lines = []
        for col in entity.columns:
            self._check_reserved(col.name)
            lines.append(format_column(col, self.options))

        pks = [self.get_id(col.name) for col in primary_keys(entity)]
        if pks:
            lines.append(f"PRIMARY KEY ({', '.join(pks)})")

        uniques = [self.get_id(col.name) for col in unique_columns(entity)]
        if uniques:
            lines.append(f"UNIQUE ({', '.join(uniques)})")

        for i, line in enumerate(lines):
            writer.write_line(line + ("," if i < len(lines) - 1 else ""))

        writer.outdent()
        writer.write_line(");")
        writer.write_line()

    def format_foreign_key(self, entity: Entity, fk: ForeignKeyConstraint) -> str:
        """Return the ALTER TABLE statement adding one constraint."""
        columns = ", ".join(self.get_id(name) for name in fk.columns)
        targets = ", ".join(self.get_id(name) for name in fk.target_columns)
        return (
            f"ALTER TABLE {self.get_id(entity.name)} "
            f"ADD FOREIGN KEY ({columns}) "
            f"REFERENCES {self.get_id(fk.target_table)}({targets});"
        )

    def write_foreign_keys(self, writer: CodeWriter, model: DataModel, entity: Entity) -> int:
        """Write the foreign keys of one entity and return how many."""
        constraints = resolve_foreign_keys(model, entity)
        for fk in constraints:
            writer.write_line(self.format_foreign_key(entity, fk))
        return len(constraints)

    def render(self, model: DataModel) -> RenderedDDL:
        """Build the full script for a data model."""
        writer = CodeWriter(get_indent_string(self.options))
        entities = model.entities

        if self.options.drop_table:
            self.write_drop_tables(writer, model)

        for entity in entities:
            self.write_table(writer, entity)

        fk_count = 0
        for entity in entities:
            fk_count += self.write_foreign_keys(writer, model, entity)

        return RenderedDDL(text=writer.get_data(), tables=len(entities), foreign_keys=fk_count)

    def generate_text(self, node: ModelNode) -> str | None:
        """Return the script for a data model, or None for any other node."""
        if node.kind == NodeKind.DATA_MODEL:
            return self.render(node).text  # type: ignore[arg-type]
        return None

    def generate(self, node: ModelNode, path: str | Path) -> GenerationResult:
        """Generate the script for ``node`` and write it to ``path``.

        Nodes other than data models generate nothing and succeed.

        Raises:
            DDLWriteError: If the file or its directory cannot be written
        """
        if node.kind != NodeKind.DATA_MODEL:
            logger.debug("Nothing to generate for %s node '%s'", node.kind, node.name)
            return GenerationResult(written=False)

        rendered = self.render(node)  # type: ignore[arg-type]
        write_ddl(path, rendered.text)
        logger.info(
            "Wrote %d table(s) and %d foreign key(s) to %s",
            rendered.tables,
            rendered.foreign_keys,
            path,
        )
        return GenerationResult(
            written=True,
            path=str(path),
            dbms=str(self.options.dbms),
            tables=rendered.tables,
            foreign_keys=rendered.foreign_keys,
            size=len(rendered.text.encode("utf-8")),
        )


def write_ddl(path: str | Path, text: str) -> None:
    """Write the script in one go, creating the parent directory if needed.

    Raises:
        DDLWriteError: If the directory or file cannot be written
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise DDLWriteError(str(path), e.strerror or str(e)) from e


def generate(
    node: ModelNode, path: str | Path, options: GenerationOptions | None = None
) -> GenerationResult:
    """Generate DDL for a data model and write it to ``path``."""
    return DDLGenerator(options).generate(node, path)
