"""
Tests for the Monkey token model: token types, keyword lookup and the
Token record itself.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.lexer.tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    lookup_ident
)


class TestLookupIdent(unittest.TestCase):
    """Keyword / identifier partition."""

    def test_keywords(self):
        expected = {
            "fn": TokenType.FUNCTION,
            "let": TokenType.LET,
            "true": TokenType.TRUE,
            "false": TokenType.FALSE,
            "if": TokenType.IF,
            "else": TokenType.ELSE,
            "return": TokenType.RETURN,
        }
        for word, token_type in expected.items():
            with self.subTest(word=word):
                self.assertEqual(lookup_ident(word), token_type)

    def test_identifiers(self):
        for word in ["x", "five", "_", "fnx", "LET", "True", "return_value", "elif"]:
            with self.subTest(word=word):
                self.assertEqual(lookup_ident(word), TokenType.IDENT)

    def test_lookup_is_stable(self):
        self.assertEqual(
            [lookup_ident(w) for w in ["let", "foo"] * 3],
            [TokenType.LET, TokenType.IDENT] * 3,
        )

    def test_keyword_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["var"] = TokenType.LET
        self.assertEqual(len(KEYWORDS), 7)


class TestTokenTables(unittest.TestCase):

    def test_single_character_symbols(self):
        self.assertEqual(set(SINGLE_CHAR_TOKENS), set("=+-!*/<>;,(){}[]:"))

    def test_two_character_symbols(self):
        self.assertEqual(TWO_CHAR_TOKENS["=="], TokenType.EQ)
        self.assertEqual(TWO_CHAR_TOKENS["!="], TokenType.NOT_EQ)
        self.assertEqual(len(TWO_CHAR_TOKENS), 2)

    def test_categories(self):
        self.assertTrue(TokenType.LET.is_keyword)
        self.assertFalse(TokenType.IDENT.is_keyword)
        self.assertTrue(TokenType.NOT_EQ.is_operator)
        self.assertFalse(TokenType.COMMA.is_operator)
        self.assertTrue(TokenType.COLON.is_delimiter)
        self.assertTrue(TokenType.STRING.is_literal)
        self.assertTrue(TokenType.FALSE.is_literal)
        self.assertFalse(TokenType.ILLEGAL.is_literal)


class TestToken(unittest.TestCase):

    def test_value_equality(self):
        self.assertEqual(Token(TokenType.INT, "5"), Token(TokenType.INT, "5"))
        self.assertNotEqual(Token(TokenType.INT, "5"), Token(TokenType.INT, "6"))
        self.assertNotEqual(Token(TokenType.IDENT, "x"), Token(TokenType.STRING, "x"))

    def test_immutable(self):
        token = Token(TokenType.IDENT, "x")
        with self.assertRaises(AttributeError):
            token.literal = "y"

    def test_properties(self):
        self.assertTrue(Token(TokenType.IDENT, "x").is_identifier)
        self.assertTrue(Token(TokenType.RETURN, "return").is_keyword)
        self.assertTrue(Token(TokenType.PLUS, "+").is_operator)
        self.assertTrue(Token(TokenType.INT, "1").is_literal)

    def test_str(self):
        self.assertEqual(str(Token(TokenType.STRING, "foo bar")), "STRING('foo bar')")
        location = SourceLocation("a.mk", 3, 7, 20)
        self.assertIn("SourceLocation('a.mk', 3, 7, 20)", repr(Token(TokenType.EOF, "", location)))


if __name__ == '__main__':
    unittest.main()
