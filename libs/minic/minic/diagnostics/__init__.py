"""minic diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from minic.diagnostics.collector import DiagnosticCollector
from minic.diagnostics.diagnostic import Diagnostic
from minic.diagnostics.location import SourceLocation
from minic.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
