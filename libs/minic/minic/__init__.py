"""minic: a minimal source-to-AST front end."""

from minic.parser import AstNode, Lexer, Parser, Token, TokenKind, parse
from minic.tree import AstSerializer, AstVisitor, serialize

__all__ = [
    "AstNode",
    "AstSerializer",
    "AstVisitor",
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "parse",
    "serialize",
]
