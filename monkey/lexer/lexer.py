"""
Monkey Lexer - turns source text into tokens, one call at a time.

The lexer is a pull-based cursor: every call to `next_token()` consumes the
next lexeme and returns exactly one Token. It never raises. Characters it
does not understand come back as ILLEGAL tokens, and once the input is
exhausted every further call returns EOF.
"""

from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    lookup_ident
)
from .errors import (
    LexerError, LexerWarning, create_illegal_character_warning,
    create_unterminated_string_warning
)


WHITESPACE = frozenset(" \t\n\r")


def is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """
    Monkey lexical analyzer.

    Holds the full input, the index of the character under the cursor
    (`position`), the index of the next character to read (`read_position`)
    and the character itself (`ch`, None once past the end).

    A Lexer is created once per source text and only moves forward. It is
    not safe to share one instance between threads.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            filename: Name of source file for diagnostics
        """
        self.input = source
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch: Optional[str] = None
        self.line = 1
        self.column = 0
        self.warnings: List[LexerWarning] = []

        self._read_char()

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF (with an empty literal) at end of input,
            and again on every call after that.
        """
        self._skip_whitespace()

        location = self._location()
        ch = self.ch

        if ch is None:
            return Token(TokenType.EOF, "", location)

        # `==` and `!=` need one character of lookahead
        if ch in ("=", "!") and self._peek_char() == "=":
            literal = ch + "="
            self._read_char()
            self._read_char()
            return Token(TWO_CHAR_TOKENS[literal], literal, location)

        token_type = SINGLE_CHAR_TOKENS.get(ch)
        if token_type is not None:
            self._read_char()
            return Token(token_type, ch, location)

        if ch == '"':
            return Token(TokenType.STRING, self._read_string(location), location)

        if is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal, location)

        if is_digit(ch):
            return Token(TokenType.INT, self._read_number(), location)

        self.warnings.append(create_illegal_character_warning(ch, location))
        self._read_char()
        return Token(TokenType.ILLEGAL, ch, location)

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Returns:
            List of tokens up to and including the first EOF token
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def _read_char(self):
        """Move the cursor one character forward."""
        if self.ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        if self.read_position >= len(self.input):
            self.ch = None
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        if self.read_position >= len(self.input):
            return None
        return self.input[self.read_position]

    def _skip_whitespace(self):
        while self.ch is not None and self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.position
        while self.ch is not None and (is_letter(self.ch) or is_digit(self.ch)):
            self._read_char()
        return self.input[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while self.ch is not None and is_digit(self.ch):
            self._read_char()
        return self.input[start:self.position]

    def _read_string(self, location: SourceLocation) -> str:
        """Read a string body; the cursor is on the opening quote."""
        self._read_char()
        start = self.position

        while self.ch is not None and self.ch != '"':
            self._read_char()

        literal = self.input[start:self.position]

        if self.ch is None:
            # Runs to end of input; the body is kept as-is.
            self.warnings.append(create_unterminated_string_warning(location))
        else:
            self._read_char()  # Skip closing quote

        return literal

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.position)

    @property
    def diagnostics(self) -> List[LexerWarning]:
        return list(self.warnings)

    def has_warnings(self) -> bool:
        """Check if lexer recorded any warnings."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics
        strict: Raise on the first diagnostic instead of returning ILLEGAL tokens

    Returns:
        List of tokens including the EOF token

    Raises:
        LexerError: If `strict` is set and scanning recorded a diagnostic
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if strict and lexer.has_warnings():
        raise LexerError.from_warning(lexer.warnings[0])

    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to a UTF-8 source file
        strict: See `tokenize_string`

    Returns:
        List of tokens

    Raises:
        LexerError: If `strict` is set and scanning recorded a diagnostic
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, strict=strict)
