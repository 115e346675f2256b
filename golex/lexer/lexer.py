"""
golex Lexer - turns Go source text into a flat token stream

The scanner is a single cursor over an in-memory string. Each step skips
whitespace, tries the recognizer rules in priority order anchored at the
cursor, and emits the first match. When nothing matches, exactly one
character is consumed as an ERROR token, so every step makes progress and
every character of the input ends up in a token or in skipped whitespace.

Comments and directives are kept in the stream on purpose.
"""

import logging
from typing import Iterator, List

from .tokens import Token, TokenType, SourceLocation
from .rules import LexerConfig, DEFAULT_CONFIG, WHITESPACE_PATTERN
from .errors import LexerWarning, create_invalid_character_warning

logger = logging.getLogger(__name__)


class Lexer:
    """
    Go lexical analyzer.

    Converts source text into a list of tokens. Unrecognized characters
    never abort the run; they are emitted as ERROR tokens and recorded
    as warnings.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 config: LexerConfig = DEFAULT_CONFIG):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            filename: Name used in token locations and diagnostics
            config: Recognizer table and keyword set
        """
        self.source = source
        self.filename = filename
        self.config = config
        self.pos = 0
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            Tokens in source order, without the END sentinel
        """
        self.pos = 0
        self.warnings.clear()

        tokens = list(self._scan())

        logger.debug("%s: %d tokens, %d invalid characters",
                     self.filename, len(tokens), len(self.warnings))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Lazily yield tokens from the current cursor position."""
        return self._scan()

    def _scan(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type == TokenType.END:
                return
            yield token

    def next_token(self) -> Token:
        """
        Scan one token starting at the cursor.

        Returns an END token once only whitespace remains.
        """
        self._skip_whitespace()

        start = self.pos
        location = SourceLocation(self.filename, start)

        if start >= len(self.source):
            return Token(TokenType.END, "", location)

        for rule in self.config.rules:
            length = rule.match_length(self.source, start)
            if length == 0:
                continue

            self.pos = start + length
            lexeme = self.source[start:self.pos]
            token_type = rule.type
            if token_type == TokenType.IDENTIFIER and lexeme in self.config.keywords:
                token_type = TokenType.KEYWORD
            return Token(token_type, lexeme, location)

        # Nothing matched: consume a single character
        char = self.source[start]
        self.pos = start + 1
        self.warnings.append(create_invalid_character_warning(char, location))
        return Token(TokenType.ERROR, char, location)

    def _skip_whitespace(self):
        match = WHITESPACE_PATTERN.match(self.source, self.pos)
        if match is not None:
            self.pos = match.end()

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def has_errors(self) -> bool:
        """Check if any character was unrecognized."""
        return len(self.warnings) > 0

    @property
    def diagnostics(self) -> List[LexerWarning]:
        return list(self.warnings)


def tokenize_string(source: str, filename: str = "<string>",
                    config: LexerConfig = DEFAULT_CONFIG) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Unlike a compiler front end this never raises for bad input; invalid
    characters come back as ERROR tokens.
    """
    return Lexer(source, filename, config).tokenize()
