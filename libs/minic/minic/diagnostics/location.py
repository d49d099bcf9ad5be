"""Source positions attached to tokens, nodes and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A position in a source buffer."""

    file: str
    line: int  # 1-indexed
    column: int  # 1-indexed

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
