"""
Tests for lexer diagnostics.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.lexer.lexer import Lexer
from monkey.lexer.tokens import SourceLocation
from monkey.lexer.errors import (
    ERROR_CODES, LexerError, create_illegal_character_warning,
    create_unterminated_string_warning
)


class TestDiagnostics(unittest.TestCase):

    def setUp(self):
        self.location = SourceLocation("t.mk", 2, 4, 10)

    def test_illegal_character_warning(self):
        warning = create_illegal_character_warning("@", self.location)
        text = str(warning)
        self.assertEqual(warning.code, "L001")
        self.assertTrue(text.startswith("WARNING[L001]: Illegal character: '@'"))
        self.assertIn("--> t.mk:2:4", text)
        self.assertIn("not valid in Monkey source code", text)

    def test_non_printable_character(self):
        warning = create_illegal_character_warning("\x07", self.location)
        self.assertIn("U+0007", str(warning))

    def test_unterminated_string_warning(self):
        warning = create_unterminated_string_warning(self.location)
        text = str(warning)
        self.assertEqual(warning.code, "L002")
        self.assertIn("suggestions:", text)
        self.assertIn('Add a closing " quote', text)

    def test_error_from_warning(self):
        error = LexerError.from_warning(create_unterminated_string_warning(self.location))
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertEqual(error.diagnostic.location, self.location)
        self.assertEqual(error.args[0], "Unterminated string literal")

    def test_codes_are_documented(self):
        self.assertEqual(set(ERROR_CODES), {"L001", "L002"})


class TestLexerDiagnostics(unittest.TestCase):

    def test_clean_input_has_no_warnings(self):
        lexer = Lexer("let x = 5;")
        lexer.tokenize()
        self.assertFalse(lexer.has_warnings())
        self.assertEqual(lexer.diagnostics, [])

    def test_warnings_are_recorded_in_order(self):
        lexer = Lexer('@ $\n"open')
        lexer.tokenize()
        self.assertEqual([w.code for w in lexer.diagnostics], ["L001", "L001", "L002"])
        self.assertEqual(lexer.diagnostics[2].location.line, 2)

    def test_eof_adds_no_warnings(self):
        lexer = Lexer("#")
        for _ in range(4):
            lexer.next_token()
        self.assertEqual(len(lexer.warnings), 1)


if __name__ == '__main__':
    unittest.main()
