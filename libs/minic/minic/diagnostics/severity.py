"""Diagnostic severity levels."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """Severity of a diagnostic. Syntax problems are the only kind reported."""

    ERROR = "error"

    def __str__(self) -> str:
        return self.value
