"""
Error handling for the golex lexer.

Scanning itself never fails: unrecognized characters become ERROR tokens
and are reported as warnings. Exceptions are reserved for problems outside
the scan loop, such as an invalid recognizer configuration or, under the
strict policy, an unreadable source file.

"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single lexer diagnostic (error, warning or info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}"
        if self.location is not None:
            result += f"\n  --> {self.location}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Base exception for fatal lexer problems.

    Carries a Diagnostic for uniform reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class ConfigurationError(LexerError):
    """Raised when a recognizer table or loader setting is unusable."""


class SourceReadError(LexerError):
    """Raised when a source file cannot be read under the strict policy."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot read source file '{path}': {reason}",
            code="L003",
            help_text="Check that the path exists and is readable."
        )
        self.path = path
        self.reason = reason


class LexerWarning:
    """A non-fatal diagnostic recorded while scanning."""

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Invalid recognizer configuration",
    "L003": "Unreadable source file",
    "L004": "Unknown source encoding",
}


def create_invalid_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create the warning recorded for an ERROR token."""
    if char.isprintable():
        help_text = f"The character '{char}' does not start any Go token."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Invalid character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_configuration_error(reason: str) -> ConfigurationError:
    return ConfigurationError(
        f"Invalid recognizer configuration: {reason}",
        code="L002"
    )


def create_unknown_encoding_error(encoding: str) -> ConfigurationError:
    return ConfigurationError(
        f"Unknown source encoding: '{encoding}'",
        code="L004",
        help_text="Use a codec name Python recognizes, such as utf-8 or latin-1."
    )
