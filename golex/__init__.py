"""
golex - a lexical analyzer for Go source code

Architecture:
    golex/
    ├── lexer/           # Tokens, recognizer table, scanner
    ├── source.py        # Source file loading
    ├── report.py        # Text and JSON reports
    └── cli.py           # Command-line interface

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize_string
from .source import tokenize_file

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize_string",
    "tokenize_file",
    "__version__",
    "__license__",
]
