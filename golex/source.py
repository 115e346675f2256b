"""
Source loading for golex.

Reads a whole file into memory before scanning. What happens when the
file cannot be read is a policy choice: the historical behavior treats
it as empty input, the strict policy raises SourceReadError. An unknown
encoding is a usage error and raises under either policy.
"""

import codecs
import logging
from enum import Enum
from typing import List, Optional

from .lexer.errors import SourceReadError, create_unknown_encoding_error
from .lexer.lexer import tokenize_string
from .lexer.rules import LexerConfig, DEFAULT_CONFIG
from .lexer.tokens import Token

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class ReadErrorPolicy(Enum):
    """What to do when a source file cannot be opened or read."""
    EMPTY = "empty"     # log a warning and scan an empty buffer
    STRICT = "strict"   # raise SourceReadError


def check_encoding(encoding: str) -> str:
    """
    Return the canonical codec name for encoding.

    Raises:
        ConfigurationError: If Python has no codec by that name
    """
    try:
        return codecs.lookup(encoding).name
    except LookupError as e:
        raise create_unknown_encoding_error(encoding) from e


def load_source(path: str, policy: ReadErrorPolicy = ReadErrorPolicy.EMPTY,
                encoding: Optional[str] = None) -> str:
    """
    Read the complete contents of path as text.

    Undecodable bytes are replaced rather than treated as a read failure.
    """
    codec = check_encoding(encoding or DEFAULT_ENCODING)
    try:
        with open(path, "r", encoding=codec, errors="replace", newline="") as f:
            return f.read()
    except OSError as e:
        reason = e.strerror or str(e)
        if policy is ReadErrorPolicy.STRICT:
            raise SourceReadError(path, reason) from e
        logger.warning("cannot read %s (%s); treating it as empty input", path, reason)
        return ""


def tokenize_file(filepath: str, config: LexerConfig = DEFAULT_CONFIG,
                  policy: ReadErrorPolicy = ReadErrorPolicy.EMPTY,
                  encoding: Optional[str] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        SourceReadError: If the file cannot be read and policy is STRICT
        ConfigurationError: If encoding is not a known codec
    """
    source = load_source(filepath, policy=policy, encoding=encoding)
    return tokenize_string(source, filepath, config)
