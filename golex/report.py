"""
Report emitters for token streams.

The text report mirrors the classic output of the tool: a header line
followed by one "Lexeme: <lexeme>\tType: <CATEGORY>" line per token.
"""

import json
from typing import Iterable, Iterator, List, TextIO

from .lexer.tokens import Token, REPORTABLE_TYPES

REPORT_HEADER = "Lexical Analysis Result"


def reportable(tokens: Iterable[Token]) -> Iterator[Token]:
    """Drop END sentinels, e.g. when a stream was built from raw scanner steps."""
    return (token for token in tokens if token.type in REPORTABLE_TYPES)


def format_token(token: Token) -> str:
    return f"Lexeme: {token.lexeme}\tType: {token.category_name}"


def write_text_report(tokens: Iterable[Token], stream: TextIO):
    """Write the header and one line per token."""
    stream.write(REPORT_HEADER + "\n")
    for token in reportable(tokens):
        stream.write(format_token(token) + "\n")


def token_records(tokens: Iterable[Token]) -> List[dict]:
    return [
        {"lexeme": token.lexeme, "type": token.category_name, "offset": token.offset}
        for token in reportable(tokens)
    ]


def write_json_report(tokens: Iterable[Token], stream: TextIO):
    """Write the token stream as a JSON array."""
    json.dump(token_records(tokens), stream, indent=2, ensure_ascii=False)
    stream.write("\n")
