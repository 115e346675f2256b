"""
Tests for source loading and the read-failure policies.

"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from golex.source import ReadErrorPolicy, check_encoding, load_source, tokenize_file
from golex.lexer.errors import ConfigurationError, SourceReadError, LexerError
from golex.lexer.tokens import TokenType


class TestLoadSource(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.missing = os.path.join(self.tmpdir.name, "missing.go")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name: str, data: bytes) -> str:
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_reads_whole_file(self):
        path = self._write("main.go", b"package main\nvar x = 1\n")
        self.assertEqual(load_source(path), "package main\nvar x = 1\n")

    def test_line_endings_preserved(self):
        path = self._write("crlf.go", b"x\r\ny\r\n")
        self.assertEqual(load_source(path), "x\r\ny\r\n")

    def test_undecodable_bytes_are_replaced(self):
        path = self._write("bad.go", b"x \xff y")
        self.assertEqual(load_source(path), "x \ufffd y")

    def test_explicit_encoding(self):
        path = self._write("latin.go", "// café\n".encode("latin-1"))
        self.assertEqual(load_source(path, encoding="latin-1"), "// café\n")

    def test_missing_file_is_empty_by_default(self):
        with self.assertLogs("golex.source", level="WARNING") as logs:
            self.assertEqual(load_source(self.missing), "")
        self.assertIn("missing.go", logs.output[0])

    def test_directory_is_empty_by_default(self):
        with self.assertLogs("golex.source", level="WARNING"):
            self.assertEqual(load_source(self.tmpdir.name), "")

    def test_missing_file_strict(self):
        with self.assertRaises(SourceReadError) as ctx:
            load_source(self.missing, policy=ReadErrorPolicy.STRICT)
        self.assertEqual(ctx.exception.path, self.missing)
        self.assertEqual(ctx.exception.diagnostic.code, "L003")
        self.assertIsInstance(ctx.exception, LexerError)

    def test_unknown_encoding_rejected_under_both_policies(self):
        path = self._write("main.go", b"var x\n")
        for policy in ReadErrorPolicy:
            with self.subTest(policy=policy):
                with self.assertRaises(ConfigurationError) as ctx:
                    load_source(path, policy=policy, encoding="no-such-codec")
                self.assertEqual(ctx.exception.diagnostic.code, "L004")

    def test_unknown_encoding_checked_before_opening(self):
        with self.assertRaises(ConfigurationError):
            load_source(self.missing, encoding="no-such-codec")

    def test_check_encoding_normalizes_name(self):
        self.assertEqual(check_encoding("UTF8"), "utf-8")
        self.assertEqual(check_encoding("latin-1"), "iso8859-1")

    def test_policy_values(self):
        self.assertIs(ReadErrorPolicy("empty"), ReadErrorPolicy.EMPTY)
        self.assertIs(ReadErrorPolicy("strict"), ReadErrorPolicy.STRICT)


class TestTokenizeFile(unittest.TestCase):

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "main.go")
            with open(path, "w", encoding="utf-8") as f:
                f.write("func f() {}\n")
            tokens = tokenize_file(path)

        self.assertEqual([t.type for t in tokens], [
            TokenType.KEYWORD, TokenType.IDENTIFIER, TokenType.DELIMITER,
            TokenType.DELIMITER, TokenType.DELIMITER, TokenType.DELIMITER,
        ])
        self.assertEqual(tokens[0].location.filename, path)

    def test_tokenize_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, "nope.go")
            with self.assertLogs("golex.source", level="WARNING"):
                self.assertEqual(tokenize_file(missing), [])
            with self.assertRaises(SourceReadError):
                tokenize_file(missing, policy=ReadErrorPolicy.STRICT)


if __name__ == "__main__":
    unittest.main()
