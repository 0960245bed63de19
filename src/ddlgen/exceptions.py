"""Custom exceptions for ddlgen.

Errors carry an actionable message plus a context dict, so the CLI can
render them either as a panel or as JSON.
"""

from __future__ import annotations

from typing import Any


class DDLGenError(Exception):
    """Base exception for all ddlgen errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ModelLoadError(DDLGenError):
    """Data model file could not be read or does not match the model format."""

    def __init__(self, path: str, reason: str) -> None:
        message = f"Cannot load data model from '{path}': {reason}"
        super().__init__(message, {"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class PreferencesError(DDLGenError):
    """Preferences file or option values are invalid."""

    pass


class EntityNotFoundError(DDLGenError):
    """Entity does not exist in the data model."""

    def __init__(self, entity_name: str, available_entities: list[str] | None = None) -> None:
        available = available_entities or []
        if available:
            message = (
                f"Entity '{entity_name}' not found. Available entities: {', '.join(available)}"
            )
        else:
            message = f"Entity '{entity_name}' not found. The data model has no entities."

        super().__init__(message, {"entity_name": entity_name, "available_entities": available})
        self.entity_name = entity_name
        self.available_entities = available


class DDLWriteError(DDLGenError):
    """Generated DDL could not be written to its destination."""

    def __init__(self, path: str, reason: str) -> None:
        message = f"Cannot write DDL to '{path}': {reason}. Check that the directory is writable."
        super().__init__(message, {"path": path, "reason": reason})
        self.path = path
        self.reason = reason
