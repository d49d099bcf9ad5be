"""The full text -> tokens -> AST -> (trace, serialization) run."""

from __future__ import annotations

from dataclasses import dataclass, field

from minic.config import PipelineConfig
from minic.diagnostics.collector import DiagnosticCollector
from minic.parser.ast_nodes import AstNode
from minic.parser.lexer import Lexer
from minic.parser.parser import Parser
from minic.parser.tokens import Token
from minic.tree.serializer import AstSerializer
from minic.tree.visitor import AstVisitor, format_trace


@dataclass
class PipelineResult:
    """Everything one pipeline run produced."""

    tokens: list[Token]
    program: AstNode
    diagnostics: DiagnosticCollector
    trace: list[str] = field(default_factory=list)
    serialized: str = ""

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_errors()

    def diagnostic_lines(self, show_locations: bool = False) -> list[str]:
        if show_locations:
            return [str(d) for d in self.diagnostics.get_all()]
        return self.diagnostics.messages()


def run_pipeline(
    source: str,
    filename: str = "<string>",
    config: PipelineConfig | None = None,
) -> PipelineResult:
    """Run every stage over *source*.

    Stages run to completion one after another.  Syntax errors end up in
    ``diagnostics``; they never stop the run.
    """
    config = config or PipelineConfig()
    diag = DiagnosticCollector()

    tokens = Lexer(source, filename, legacy=config.legacy).tokenize()
    program = Parser(tokens, diag).parse_program()

    trace: list[str] = []
    AstVisitor(lambda node: trace.append(format_trace(node))).visit(program)

    serialized = AstSerializer(escape=config.escape).serialize(program)
    return PipelineResult(tokens, program, diag, trace, serialized)
