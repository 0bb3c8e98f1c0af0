"""
Monkey Lexer Package

Implements the lexical analyzer (scanner) for the Monkey language.

Key Features:
- Pull-based scanning: one token per `next_token()` call
- One character of lookahead for `==` and `!=`
- Keyword / identifier resolution through a fixed keyword table
- Never fails: unknown characters become ILLEGAL tokens
- Source locations and non-fatal diagnostics for tooling
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, lookup_ident
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "lookup_ident",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
]
