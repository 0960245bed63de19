"""DDL generation preferences.

Options are looked up under ``ddl.gen.*`` keys, the same keys a preferences
file uses. Resolution order, highest first:

1. Explicit overrides (CLI flags)
2. ``DDLGEN_*`` environment variables
3. A JSON preferences file
4. Defaults from ``PREFERENCE_SCHEMA``
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ddlgen.core.types import Dialect, FileExtension, GenerationOptions
from ddlgen.exceptions import PreferencesError

PREFERENCE_ID = "ddl"

PREFERENCE_SCHEMA: dict[str, dict[str, Any]] = {
    "ddl.gen": {
        "text": "DDL Generation",
        "type": "Section",
    },
    "ddl.gen.fileExtension": {
        "text": "DDL File Extension",
        "description": "DDL File Extension",
        "type": "Dropdown",
        "options": FileExtension.values(),
        "default": FileExtension.SQL.value,
    },
    "ddl.gen.quoteIdentifiers": {
        "text": "Quote Identifiers",
        "description": "Quote identifiers",
        "type": "Check",
        "default": True,
    },
    "ddl.gen.dropTable": {
        "text": "Drop Tables",
        "description": "Drop tables before create",
        "type": "Check",
        "default": True,
    },
    "ddl.gen.dbms": {
        "text": "DBMS",
        "description": "Select a DBMS where generated DDL to be executed",
        "type": "Dropdown",
        "options": Dialect.values(),
        "default": Dialect.MYSQL.value,
    },
    "ddl.gen.useTab": {
        "text": "Use Tab",
        "description": "Use Tab for indentation instead of spaces.",
        "type": "Check",
        "default": False,
    },
    "ddl.gen.indentSpaces": {
        "text": "Indent Spaces",
        "description": "Number of spaces for indentation.",
        "type": "Number",
        "default": 4,
    },
}

# Preference key -> (GenerationOptions field, environment variable)
OPTION_KEYS: dict[str, tuple[str, str]] = {
    "ddl.gen.fileExtension": ("file_extension", "DDLGEN_FILE_EXTENSION"),
    "ddl.gen.quoteIdentifiers": ("quote_identifiers", "DDLGEN_QUOTE_IDENTIFIERS"),
    "ddl.gen.dropTable": ("drop_table", "DDLGEN_DROP_TABLE"),
    "ddl.gen.dbms": ("dbms", "DDLGEN_DBMS"),
    "ddl.gen.useTab": ("use_tab", "DDLGEN_USE_TAB"),
    "ddl.gen.indentSpaces": ("indent_spaces", "DDLGEN_INDENT_SPACES"),
}


def get_defaults() -> dict[str, Any]:
    """Return default preference values keyed by preference key."""
    return {key: PREFERENCE_SCHEMA[key]["default"] for key in OPTION_KEYS}


def _build_options(values: Mapping[str, Any]) -> GenerationOptions:
    try:
        return GenerationOptions(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise PreferencesError(
            f"Invalid DDL generation options: {problems}",
            {"values": {k: str(v) for k, v in values.items()}},
        ) from e


def get_gen_options(preferences: Mapping[str, Any] | None = None) -> GenerationOptions:
    """Map ``ddl.gen.*`` preferences to options, defaulting missing keys.

    Raises:
        PreferencesError: If a value is invalid
    """
    preferences = preferences or {}
    values = {}
    for key, (field_name, _) in OPTION_KEYS.items():
        values[field_name] = preferences.get(key, PREFERENCE_SCHEMA[key]["default"])
    return _build_options(values)


def load_preferences(path: str | Path) -> dict[str, Any]:
    """Read a JSON preferences file of ``ddl.gen.*`` keys.

    Unknown keys are ignored.

    Raises:
        PreferencesError: If the file is missing, unreadable, or not a JSON object
    """
    file_path = Path(path)
    if not file_path.exists():
        raise PreferencesError(f"Preferences file not found: {path}", {"path": str(path)})

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PreferencesError(
            f"Invalid JSON in preferences file {path} on line {e.lineno}: {e.msg}",
            {"path": str(path)},
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise PreferencesError(
            f"Cannot read preferences file {path}: {e}", {"path": str(path)}
        ) from e

    if not isinstance(data, dict):
        raise PreferencesError(
            f"Preferences file {path} must contain a JSON object", {"path": str(path)}
        )
    return {key: value for key, value in data.items() if key in OPTION_KEYS}


def options_from_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return ``ddl.gen.*`` values set through ``DDLGEN_*`` variables."""
    environ = os.environ if environ is None else environ
    values = {}
    for key, (_, env_name) in OPTION_KEYS.items():
        if env_value := environ.get(env_name):
            values[key] = env_value
    return values


def resolve_options(
    overrides: Mapping[str, Any] | None = None,
    preferences_file: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[GenerationOptions, dict[str, str]]:
    """Merge all option sources.

    Args:
        overrides: ``ddl.gen.*`` values from the command line; None values are ignored
        preferences_file: Optional JSON preferences file
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        The options and, per preference key, the source its value came from
    """
    values = get_defaults()
    sources = dict.fromkeys(values, "default")

    layers: list[tuple[str, Mapping[str, Any]]] = []
    if preferences_file is not None:
        layers.append(("file", load_preferences(preferences_file)))
    layers.append(("env", options_from_env(environ)))
    layers.append(("cli", {k: v for k, v in (overrides or {}).items() if v is not None}))

    for source, layer in layers:
        for key, value in layer.items():
            if key in OPTION_KEYS:
                values[key] = value
                sources[key] = source

    return get_gen_options(values), sources
