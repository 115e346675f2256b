"""
Recognizer table for the golex lexer.

The table is an ordered tuple of (category, anchored regex) rules. The
scanner tries the rules in order at the cursor and the FIRST rule that
matches wins; it is not a longest-match lexer. The order is therefore
part of the contract wherever two categories can start with the same
character:

    COMMENT      before OPERATOR    '/' starts both '// x' and '/'
    FLOAT        before HEX/INTEGER '3.14' must not split at the dot
    HEX          before INTEGER     '0x1A' must not split into '0' 'x1A'
    OPERATOR     multi-char forms are tried before their one-char prefixes
    IDENTIFIER   last; keywords are reclassified after the match

New rules must be inserted with LexerConfig.insert_before() at the
position that keeps these relations intact.
"""

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from .tokens import TokenType, KEYWORDS
from .errors import create_configuration_error


# Categories the scanner assigns itself; no rule may produce them.
_RESERVED_TYPES = frozenset({TokenType.KEYWORD, TokenType.ERROR, TokenType.END})

# Whitespace skipped between tokens (the C isspace set).
WHITESPACE_PATTERN = re.compile(r'[ \t\n\r\f\v]+')

OPERATORS: Tuple[str, ...] = (
    "==", "!=", "++", "--", "&&", "||", "<=", ">=",
    "+", "-", "*", "/", "=", "<", ">",
)

DELIMITERS: Tuple[str, ...] = (";", ",", ".", "(", ")", "{", "}", "[", "]", ":")


def alternation(symbols: Iterable[str]) -> str:
    """Build a regex alternation that tries longer symbols first."""
    ordered = sorted(symbols, key=len, reverse=True)
    return "|".join(re.escape(symbol) for symbol in ordered)


@dataclass(frozen=True)
class RecognizerRule:
    """One entry of the recognizer table."""
    type: TokenType
    pattern: re.Pattern

    @classmethod
    def compile(cls, token_type: TokenType, pattern: Union[str, re.Pattern],
                flags: int = 0) -> "RecognizerRule":
        """Build a rule from a regex string, or wrap an already compiled pattern."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern, flags)
        elif flags:
            raise create_configuration_error(
                f"flags cannot be applied to the precompiled {token_type.name} pattern {pattern.pattern!r}"
            )
        return cls(token_type, pattern)

    def match_length(self, source: str, pos: int) -> int:
        """
        Length of the match anchored at pos, or 0 when the rule does not match.
        """
        match = self.pattern.match(source, pos)
        if match is None:
            return 0
        return match.end() - pos


@dataclass(frozen=True)
class LexerConfig:
    """
    Immutable lexer configuration: the ordered recognizer table and the
    keyword set used to reclassify identifiers.

    Built once and shared read-only between Lexer instances. The helper
    methods return new configurations instead of mutating this one.
    """
    rules: Tuple[RecognizerRule, ...]
    keywords: FrozenSet[str] = field(default=KEYWORDS)

    def __post_init__(self):
        # Accept any iterable but store immutable containers
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "keywords", frozenset(self.keywords))
        self._validate()

    def _validate(self):
        if not self.rules:
            raise create_configuration_error("the recognizer table is empty")

        for rule in self.rules:
            if rule.type in _RESERVED_TYPES:
                raise create_configuration_error(
                    f"{rule.type.name} is assigned by the scanner and cannot have a rule"
                )
            if rule.pattern.match("") is not None:
                raise create_configuration_error(
                    f"the {rule.type.name} pattern {rule.pattern.pattern!r} matches the empty string"
                )

    @property
    def types(self) -> Tuple[TokenType, ...]:
        """Rule categories in priority order."""
        return tuple(rule.type for rule in self.rules)

    def rule_for(self, token_type: TokenType) -> Optional[RecognizerRule]:
        for rule in self.rules:
            if rule.type == token_type:
                return rule
        return None

    def insert_before(self, rule: RecognizerRule, before: TokenType) -> "LexerConfig":
        """Return a copy with rule placed just ahead of the first rule for before."""
        for index, existing in enumerate(self.rules):
            if existing.type == before:
                rules = self.rules[:index] + (rule,) + self.rules[index:]
                return LexerConfig(rules, self.keywords)
        raise create_configuration_error(f"no {before.name} rule to insert before")

    def with_keywords(self, keywords: Iterable[str]) -> "LexerConfig":
        return LexerConfig(self.rules, frozenset(keywords))


DEFAULT_RULES: Tuple[RecognizerRule, ...] = (
    # Line comment, or block comment up to the first '*/' (to end of input if unterminated)
    RecognizerRule.compile(TokenType.COMMENT, r'//[^\r\n]*|/\*.*?(?:\*/|\Z)', re.DOTALL),
    RecognizerRule.compile(TokenType.PREPROCESSOR, r'#[^\r\n]*'),
    RecognizerRule.compile(TokenType.FLOAT, r'\d+\.\d+(?:[eE][-+]?\d+)?\b', re.ASCII),
    RecognizerRule.compile(TokenType.HEX, r'0[xX][0-9a-fA-F]+\b', re.ASCII),
    RecognizerRule.compile(TokenType.INTEGER, r'\d+\b', re.ASCII),
    # Unterminated strings and chars do not match and fall through
    RecognizerRule.compile(TokenType.STRING, r'"(?:[^"\\]|\\.)*"'),
    RecognizerRule.compile(TokenType.CHAR, r"'(?:[^'\\]|\\.)'"),
    RecognizerRule.compile(TokenType.OPERATOR, alternation(OPERATORS)),
    RecognizerRule.compile(TokenType.DELIMITER, alternation(DELIMITERS)),
    RecognizerRule.compile(TokenType.IDENTIFIER, r'[A-Za-z_][A-Za-z0-9_]*'),
)


def build_default_config() -> LexerConfig:
    """Build the standard Go recognizer configuration."""
    return LexerConfig(DEFAULT_RULES, KEYWORDS)


DEFAULT_CONFIG = build_default_config()
