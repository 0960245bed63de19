"""CLI context management for shared state and option sources."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path


def get_preferences_path(path: str | None) -> Path | None:
    """Resolve the preferences file from CLI arg or environment variable.

    Priority:
    1. Explicit path argument
    2. DDLGEN_PREFERENCES environment variable
    3. No preferences file (defaults apply)
    """
    if path:
        return Path(path)
    if env_path := os.getenv("DDLGEN_PREFERENCES"):
        return Path(env_path)
    return None


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@dataclass
class CLIContext:
    """Shared context for CLI commands."""

    json_output: bool
    verbose: bool = False
