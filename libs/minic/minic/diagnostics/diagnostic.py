"""A single diagnostic message."""

from __future__ import annotations

from dataclasses import dataclass

from minic.diagnostics.location import SourceLocation
from minic.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}{self.severity}: {self.message}"
