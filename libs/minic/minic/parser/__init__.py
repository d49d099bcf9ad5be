"""minic parser subpackage (Layer 1 -- depends on diagnostics)."""

from minic.parser.ast_nodes import PROGRAM, STATEMENT, AstNode, program_node, statement_node
from minic.parser.errors import ParseError
from minic.parser.lexer import Lexer
from minic.parser.parser import Parser, parse
from minic.parser.tokens import Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "Lexer",
    "PROGRAM",
    "STATEMENT",
    "AstNode",
    "program_node",
    "statement_node",
    "Parser",
    "parse",
    "ParseError",
]
