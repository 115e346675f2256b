"""
Command-line entry point for golex.

Usage:
    golex [options] <go-file>

Options:
    --json              Emit the token stream as JSON
    --on-read-error     'empty' (default) scans an unreadable file as empty
                        input, 'strict' fails with exit status 2
    --encoding          Source file encoding (default utf-8); an unknown
                        codec fails with exit status 2
    -v, --verbose       Debug logging on stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import Lexer, LexerError
from .report import write_json_report, write_text_report
from .source import DEFAULT_ENCODING, ReadErrorPolicy, load_source

logger = logging.getLogger(__name__)

USAGE = "Usage: golex <go-file>"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_READ_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="golex",
        description="Tokenize a Go source file and print the token stream.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", nargs="?", help="path to the Go source file")
    parser.add_argument("--json", action="store_true",
                        help="emit tokens as a JSON array")
    parser.add_argument("--on-read-error", dest="on_read_error",
                        choices=[policy.value for policy in ReadErrorPolicy],
                        default=ReadErrorPolicy.EMPTY.value,
                        help="behavior when the source file cannot be read")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING,
                        help="source file encoding")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("golex").setLevel(logging.DEBUG if args.verbose else logging.NOTSET)

    if args.source is None:
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    policy = ReadErrorPolicy(args.on_read_error)
    try:
        source = load_source(args.source, policy=policy, encoding=args.encoding)
    except LexerError as e:
        print(e, file=sys.stderr)
        return EXIT_READ_ERROR

    lexer = Lexer(source, filename=args.source)
    tokens = lexer.tokenize()

    logger.debug("read %d characters from %s", len(source), args.source)
    for warning in lexer.diagnostics:
        logger.debug("%s", warning)

    if args.json:
        write_json_report(tokens, sys.stdout)
    else:
        write_text_report(tokens, sys.stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
