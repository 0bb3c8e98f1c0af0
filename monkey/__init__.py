"""
Monkey Language Front End

Scanner, token taxonomy and syntax tree node shapes for the Monkey
programming language.

Architecture:
    monkey/
    ├── lexer/           # Tokens, scanner and diagnostics
    └── parser/          # AST node definitions

License: MIT
"""

__version__ = "0.1.0"
__author__ = "Monkey developers"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, lookup_ident
from .parser import Program

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "lookup_ident",
    "Program",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
