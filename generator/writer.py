# ============================================================================
# DDL WRITER
# ============================================================================
# STATUS: Generator - Buffered text sink for DDL statements
# PURPOSE: Template printing, statement delimiting, deferred flush
# CREATED: 16 OCT 2026
# EXPORTS: DDLWriter
# ============================================================================
"""
DDL Writer

Schema objects render themselves through a DDLWriter. Output is buffered
and only handed to the real stream by write_to(), so a failure halfway
through emission never leaves a partial script behind.

Templates use positional str.format fields:

    writer.println("CREATE TABLE {0} (", table.name)
    writer.print(")")
    writer.end_statement()
"""

import io
from typing import Any, TextIO


class DDLWriter:
    """Buffered writer for DDL text."""

    def __init__(self, delimiter: str = ";", indent: str = "    "):
        self._delimiter = delimiter
        self._indent = indent
        self._buffer = io.StringIO()
        self._statements = 0

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def indent(self) -> str:
        return self._indent

    @property
    def statement_count(self) -> int:
        return self._statements

    def print(self, template: str = "", *args: Any) -> None:
        """Write text; template fields are only expanded when args are given."""
        self._buffer.write(template.format(*args) if args else template)

    def println(self, template: str = "", *args: Any) -> None:
        """Write text followed by a newline."""
        self.print(template, *args)
        self._buffer.write("\n")

    def end_statement(self) -> None:
        """Terminate the current statement and leave a blank line."""
        self._buffer.write(f"{self._delimiter}\n\n")
        self._statements += 1

    def comment(self, text: str, prefix: str = "--") -> None:
        """Write a single-line comment."""
        self.println("{0} {1}", prefix, text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def write_to(self, output: TextIO) -> int:
        """
        Flush the buffered script to an output stream.

        Returns:
            Number of characters written
        """
        text = self.getvalue()
        output.write(text)
        output.flush()
        return len(text)


__all__ = ["DDLWriter"]
