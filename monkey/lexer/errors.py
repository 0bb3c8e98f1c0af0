"""
Diagnostics for the Monkey lexer.

The scanner itself never fails. Problems it notices along the way (illegal
characters, strings that run off the end of the input) are recorded as
warnings with source locations so that a consumer can decide what to do
with them.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when a consumer treats a lexer diagnostic as fatal.

    The Lexer never raises this; see `tokenize_string(..., strict=True)`.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @classmethod
    def from_warning(cls, warning: "LexerWarning") -> "LexerError":
        """Promote a recorded warning to an error."""
        d = warning.diagnostic
        return cls(d.message, d.location, code=d.code,
                   help_text=d.help_text, suggestions=d.suggestions)

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop scanning.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Illegal character",
    "L002": "Unterminated string literal",
}


def create_illegal_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Monkey source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Illegal character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a string literal that reaches end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="The string runs to the end of the input.",
        suggestions=['Add a closing " quote'],
    )
