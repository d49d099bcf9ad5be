"""Token definitions for the minic lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from minic.diagnostics.location import SourceLocation


class TokenKind(Enum):
    """Token classifications.

    ``KEYWORD``, ``COMMENT`` and ``WHITESPACE`` are part of the token model
    but are never produced by the current lexer.
    """

    IDENTIFIER = auto()
    KEYWORD = auto()
    OPERATOR = auto()
    LITERAL = auto()
    COMMENT = auto()
    WHITESPACE = auto()
    UNKNOWN = auto()  # unrecognized character (and end of input in legacy mode)

    # Special
    EOF = auto()


# Single characters classified as OPERATOR in standard mode.
# Legacy mode reports all of these as UNKNOWN.
PUNCTUATION: frozenset[str] = frozenset(";,(){}[]=+-*/<>!&|.:?%^~")

SEMICOLON = ";"


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    kind: TokenKind
    text: str
    location: SourceLocation | None = None
