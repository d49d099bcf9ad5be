"""Recursive-descent parser for minic token streams.

Handles a program made of statements of the form ``IDENT ;``.  Each
malformed statement is reported and dropped; parsing always runs to the end
of the token list and always returns a ``Program`` root.
"""

from __future__ import annotations

from minic.diagnostics.collector import DiagnosticCollector
from minic.parser.ast_nodes import AstNode, program_node, statement_node
from minic.parser.errors import ParseError
from minic.parser.lexer import Lexer
from minic.parser.tokens import SEMICOLON, Token, TokenKind

MSG_EXPECTED_SEMICOLON = "Expected semicolon after identifier."
MSG_UNEXPECTED_TOKEN = "Unexpected token: {text}"


class Parser:
    """Recursive-descent parser for minic programs."""

    def __init__(
        self,
        tokens: list[Token],
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._tokens = tokens
        self._diag = diagnostics or DiagnosticCollector()
        self._pos = 0

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        """Return the current token, or a synthetic EOF past the end."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        last = self._tokens[-1].location if self._tokens else None
        return Token(TokenKind.EOF, "", last)

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens) or self._tokens[self._pos].kind == TokenKind.EOF

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._peek()
        if self._pos < len(self._tokens):
            self._pos += 1
        return tok

    def _error(self, message: str, tok: Token) -> ParseError:
        self._diag.error(message, tok.location)
        return ParseError(message, tok.location)

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse_program(self) -> AstNode:
        """Parse every statement up to the end of the token list."""
        root = program_node(self._tokens[0].location if self._tokens else None)
        while not self._at_end():
            start = self._pos
            stmt = self.parse_statement()
            if stmt is not None:
                root.add_child(stmt)
            if self._pos == start:
                # Nothing consumed: drop the offending token and retry.
                self._advance()
        return root

    def parse_statement(self) -> AstNode | None:
        """Parse ``IDENT ;``.

        Returns ``None`` after reporting a diagnostic if the statement is
        malformed.  An unexpected leading token is not consumed, and neither
        is the token found where the semicolon should be.
        """
        try:
            return self._parse_statement()
        except ParseError:
            return None

    def _parse_statement(self) -> AstNode:
        tok = self._peek()
        if tok.kind != TokenKind.IDENTIFIER:
            raise self._error(MSG_UNEXPECTED_TOKEN.format(text=tok.text), tok)
        node = statement_node(tok.text, tok.location)
        self._advance()

        tok = self._peek()
        if tok.text != SEMICOLON:
            raise self._error(MSG_EXPECTED_SEMICOLON, tok)
        self._advance()
        return node


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(
    source: str,
    filename: str = "<string>",
    *,
    legacy: bool = False,
) -> tuple[AstNode, DiagnosticCollector]:
    """Lex and parse *source*.

    Returns:
        A ``(program_ast, diagnostics)`` tuple.
    """
    diag = DiagnosticCollector()
    tokens = Lexer(source, filename, legacy=legacy).tokenize()
    program = Parser(tokens, diag).parse_program()
    return program, diag
