"""
Token definitions for the golex lexer.

This module defines the token categories produced by the Go lexer:
- Numeric literals (decimal integers, floats, hexadecimal integers)
- String and character literals
- Identifiers and reserved keywords
- Operators and delimiters
- Comments and preprocessor-style directives (kept in the output stream)
- Error tokens for unrecognized characters

"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import FrozenSet


class TokenType(Enum):
    """
    Enumeration of all token categories.

    END is an internal sentinel returned by the scanner when the input is
    exhausted; it never appears in a tokenized stream.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14, 1.5e-3
    HEX = auto()                    # 0x1A
    STRING = auto()                 # "hello\n"
    CHAR = auto()                   # 'a', '\''

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    IDENTIFIER = auto()             # main, _tmp, x1
    KEYWORD = auto()                # func, var, return

    # ========================================================================
    # Operators and Punctuation
    # ========================================================================
    OPERATOR = auto()               # == != ++ -- && || <= >= + - * / = < >
    DELIMITER = auto()              # ; , . ( ) { } [ ] :

    # ========================================================================
    # Trivia retained in the stream
    # ========================================================================
    COMMENT = auto()                # // line, /* block */
    PREPROCESSOR = auto()           # #directive

    # ========================================================================
    # Error and Sentinel Tokens
    # ========================================================================
    ERROR = auto()                  # single unrecognized character
    END = auto()                    # end of input (never emitted)

    @property
    def display_name(self) -> str:
        """Name used in analysis reports (INTEGER, KEYWORD, ...)."""
        return self.name


@dataclass(frozen=True)
class SourceLocation:
    """
    Position of a token in the source text.

    Only the character offset is tracked; the lexer does not compute
    line and column numbers.
    """
    filename: str
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}@{self.offset}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: the exact lexeme consumed from the source and its category.
    """
    type: TokenType
    lexeme: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    @property
    def category_name(self) -> str:
        return self.type.display_name

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def end_offset(self) -> int:
        """Offset one past the last character of the lexeme."""
        return self.location.offset + len(self.lexeme)

    @property
    def is_keyword(self) -> bool:
        return self.type == TokenType.KEYWORD

    @property
    def is_error(self) -> bool:
        return self.type == TokenType.ERROR

    @property
    def is_trivia(self) -> bool:
        """Comments and directives, which parsers usually skip."""
        return self.type in (TokenType.COMMENT, TokenType.PREPROCESSOR)


# Reserved words of the Go language. Only lexemes matched by the
# identifier rule are looked up here.
KEYWORDS: FrozenSet[str] = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
})

# Categories that may appear in a report, in declaration order.
REPORTABLE_TYPES = tuple(t for t in TokenType if t is not TokenType.END)
