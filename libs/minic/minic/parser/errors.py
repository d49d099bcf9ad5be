"""Parse error types for the minic parser."""

from __future__ import annotations

from minic.diagnostics.location import SourceLocation


class ParseError(Exception):
    """Raised inside the parser to abandon the current statement."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.location = location
