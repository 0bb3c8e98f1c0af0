"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey scanner can produce:
- Special tokens (illegal character, end of input)
- Identifiers and literals (integers, strings)
- Operators and comparison operators
- Punctuation and delimiters
- Keywords

The set is closed. Anything the scanner does not recognise becomes ILLEGAL
rather than a new kind.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # add, foo_bar, x1
    INT = auto()                    # 1343456
    STRING = auto()                 # "foo bar"

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    # Comparison operators
    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=
    LT = auto()                     # <
    GT = auto()                     # >

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    COLON = auto()                  # :

    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }
    LBRACKET = auto()               # [
    RBRACKET = auto()               # ]

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        return self in _OPERATOR_TYPES

    @property
    def is_delimiter(self) -> bool:
        return self in _DELIMITER_TYPES

    @property
    def is_literal(self) -> bool:
        """Integer and string literals plus the boolean keywords."""
        return self in (
            TokenType.INT, TokenType.STRING, TokenType.TRUE, TokenType.FALSE
        )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics; it never takes part in token equality.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    Two tokens are equal when their type and literal are equal. The source
    location is carried along for error reporting only.
    """
    type: TokenType
    literal: str                    # Raw text from source (quotes stripped for strings)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.location!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type.is_literal

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type.is_keyword

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type.is_operator

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENT


# Lookup tables for token recognition. All of them are read-only views built
# once at import time.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    # Operators
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,

    # Punctuation
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
})

# Only `=` and `!` may start a two-character operator, and only with `=`.
TWO_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())

_OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS, TokenType.BANG,
    TokenType.ASTERISK, TokenType.SLASH,
    TokenType.EQ, TokenType.NOT_EQ, TokenType.LT, TokenType.GT,
})

_DELIMITER_TYPES = frozenset({
    TokenType.COMMA, TokenType.SEMICOLON, TokenType.COLON,
    TokenType.LPAREN, TokenType.RPAREN,
    TokenType.LBRACE, TokenType.RBRACE,
    TokenType.LBRACKET, TokenType.RBRACKET,
})


def lookup_ident(ident: str) -> TokenType:
    """
    Classify an identifier-shaped lexeme.

    Args:
        ident: A run of letters, digits and underscores

    Returns:
        The keyword's token type if `ident` is reserved, otherwise IDENT
    """
    return KEYWORDS.get(ident, TokenType.IDENT)
