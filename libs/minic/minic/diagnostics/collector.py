"""Diagnostic collector shared by the parser and the pipeline driver."""

from __future__ import annotations

from minic.diagnostics.diagnostic import Diagnostic
from minic.diagnostics.location import SourceLocation
from minic.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics in the order they are reported."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(self, message: str, location: SourceLocation | None = None) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, message, location))

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def messages(self) -> list[str]:
        """Return the bare messages, without location or severity."""
        return [d.message for d in self._diagnostics]

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
