"""Tests for the top-level atomscript API."""

import pytest

from atomscript import Lexer, LexConfig, Token, TokenType, tokenize


class TestTokenize:
    """atomscript.tokenize() returns a list ending in EOF."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("atom five = 5;", ["Atom", "Ident(five)", "Assign", "Int(5)", "Semicolon", "EOF"]),
            (
                "10 == 10; 10 != 9;",
                ["Int(10)", "Eq", "Int(10)", "Semicolon", "Int(10)", "NotEq", "Int(9)", "Semicolon", "EOF"],
            ),
            ("[1, 2];", ["LBracket", "Int(1)", "Comma", "Int(2)", "RBracket", "Semicolon", "EOF"]),
            ('{"foo": "bar"}', ["LBrace", "String(foo)", "Colon", "String(bar)", "RBrace", "EOF"]),
        ],
    )
    def test_examples(self, source: str, expected: list[str]) -> None:
        assert [str(t) for t in tokenize(source)] == expected

    def test_returns_list(self) -> None:
        result = tokenize("x")
        assert isinstance(result, list)
        assert result == [Token(TokenType.IDENT, "x"), Token(TokenType.EOF)]

    def test_empty(self) -> None:
        assert tokenize("") == [Token(TokenType.EOF)]

    def test_matches_lexer(self) -> None:
        source = 'molecule m = reaction(a) { produce "a"; };'
        assert tokenize(source) == list(Lexer(source).tokenize())

    def test_explicit_config(self) -> None:
        assert tokenize("300", config=LexConfig(int_bits=8))[0].type is TokenType.LITERAL_OVERFLOW
