"""
golex Lexer Package

Implements a priority-ordered, regex-table lexical analyzer for Go source.

Key Features:
- First-match-wins recognizer table with an explicit ordering contract
- Keyword reclassification of identifiers
- Per-character error recovery (invalid input never aborts a run)
- Comments and directives retained in the token stream
- Immutable, injectable lexer configuration

"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .rules import RecognizerRule, LexerConfig, DEFAULT_CONFIG, build_default_config
from .errors import (
    LexerError, LexerWarning, ConfigurationError, SourceReadError, Diagnostic
)
from .lexer import Lexer, tokenize_string

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "RecognizerRule",
    "LexerConfig",
    "DEFAULT_CONFIG",
    "build_default_config",
    "LexerError",
    "LexerWarning",
    "ConfigurationError",
    "SourceReadError",
    "Diagnostic",
    "tokenize_string",
]
