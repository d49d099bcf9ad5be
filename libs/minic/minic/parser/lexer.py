"""Lexer (tokenizer) for minic source text."""

from __future__ import annotations

from typing import Callable

from minic.diagnostics.location import SourceLocation
from minic.parser.tokens import PUNCTUATION, Token, TokenKind

_SPACE = frozenset(" \t\n\r\f\v")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


class Lexer:
    """Tokenize a source buffer one token at a time.

    Identifiers are runs of letters, digits and underscores starting with a
    letter or underscore; literals are runs of digits.  Any other
    non-whitespace character becomes a single-character token.  Letters,
    digits and whitespace are ASCII only: ``é`` or ``²`` is a
    single-character token like any other symbol.

    In standard mode known punctuation is an ``OPERATOR``, other characters
    are ``UNKNOWN`` and the end of input is ``EOF``.  With ``legacy=True``
    every such character, and the end of input, is ``UNKNOWN``, and
    :meth:`tokenize` stops at the first one.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        *,
        legacy: bool = False,
    ) -> None:
        self._source = source
        self._filename = filename
        self._legacy = legacy
        self._pos = 0
        self._line = 1
        self._col = 1

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _loc(self) -> SourceLocation:
        return SourceLocation(file=self._filename, line=self._line, column=self._col)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in _SPACE:
            self._advance()

    def _scan_while(self, predicate: Callable[[str], bool]) -> str:
        begin = self._pos
        while not self._at_end() and predicate(self._peek()):
            self._advance()
        return self._source[begin : self._pos]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token.

        Once the input is exhausted every call returns the end-of-input
        sentinel (empty text).
        """
        self._skip_whitespace()
        loc = self._loc()

        if self._at_end():
            kind = TokenKind.UNKNOWN if self._legacy else TokenKind.EOF
            return Token(kind, "", loc)

        ch = self._peek()

        if _is_letter(ch):
            text = self._scan_while(lambda c: _is_letter(c) or _is_digit(c))
            return Token(TokenKind.IDENTIFIER, text, loc)

        if _is_digit(ch):
            text = self._scan_while(_is_digit)
            return Token(TokenKind.LITERAL, text, loc)

        self._advance()
        if not self._legacy and ch in PUNCTUATION:
            return Token(TokenKind.OPERATOR, ch, loc)
        return Token(TokenKind.UNKNOWN, ch, loc)

    def tokenize(self) -> list[Token]:
        """Tokenize the remaining source, including the terminating token.

        Standard mode stops at ``EOF``.  Legacy mode stops at the first
        ``UNKNOWN`` token, which may be a punctuation character rather than
        the true end of input.
        """
        stop = TokenKind.UNKNOWN if self._legacy else TokenKind.EOF
        tokens: list[Token] = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.kind == stop:
                return tokens
