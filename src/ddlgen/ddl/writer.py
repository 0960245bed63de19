"""Line buffer with indentation for emitting DDL text."""

from __future__ import annotations


class CodeWriter:
    """Accumulates newline-terminated lines at the current indentation."""

    def __init__(self, indent_string: str = "    ") -> None:
        self._indent_string = indent_string
        self._level = 0
        self._lines: list[str] = []

    def indent(self) -> None:
        self._level += 1

    def outdent(self) -> None:
        if self._level > 0:
            self._level -= 1

    def write_line(self, line: str = "") -> None:
        """Write one line; empty lines are never indented."""
        if line:
            self._lines.append(self._indent_string * self._level + line)
        else:
            self._lines.append("")

    def get_data(self) -> str:
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"
