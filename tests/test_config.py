"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior and validation.
"""

from threading import Thread

import pytest

from atomscript import (
    LexConfig,
    Lexer,
    TokenType,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)
from atomscript.config import MAX_INT_BITS


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.int_bits == 32
        assert config.strict is False
        assert config.source_file is None

    def test_max_int(self) -> None:
        assert LexConfig().max_int == 2_147_483_647
        assert LexConfig(int_bits=64).max_int == 9_223_372_036_854_775_807
        assert LexConfig(int_bits=2).max_int == 1

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    @pytest.mark.parametrize("bits", [-1, 0, 1, MAX_INT_BITS + 1])
    def test_invalid_int_bits(self, bits: int) -> None:
        with pytest.raises(ValueError, match="int_bits"):
            LexConfig(int_bits=bits)

    def test_widest_int_bits_accepted(self) -> None:
        config = LexConfig(int_bits=MAX_INT_BITS)
        value = config.max_int
        assert tokenize(str(value), config=config)[0].literal == value


class TestFromDict:
    """LexConfig.from_dict filters unknown keys."""

    def test_known_keys(self) -> None:
        config = LexConfig.from_dict({"int_bits": 16, "strict": True, "source_file": "a.atom"})
        assert config == LexConfig(int_bits=16, strict=True, source_file="a.atom")

    def test_unknown_keys_ignored(self) -> None:
        config = LexConfig.from_dict({"int_bits": 64, "unknown_key": "ignored"})
        assert config.int_bits == 64
        assert config.strict is False

    def test_empty_dict_is_default(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()

    def test_validation_still_applies(self) -> None:
        with pytest.raises(ValueError):
            LexConfig.from_dict({"int_bits": 0})


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_get(self) -> None:
        set_lex_config(LexConfig(strict=True))
        assert get_lex_config().strict is True

    def test_reset(self) -> None:
        set_lex_config(LexConfig(int_bits=8))
        reset_lex_config()
        assert get_lex_config().int_bits == 32

    def test_set_config_affects_new_lexers(self) -> None:
        set_lex_config(LexConfig(int_bits=8))
        assert Lexer("255").next_token().type is TokenType.LITERAL_OVERFLOW


class TestContextManager:
    """Test lex_config_context."""

    def test_restores_previous(self) -> None:
        with lex_config_context(LexConfig(int_bits=16)):
            assert get_lex_config().int_bits == 16
        assert get_lex_config().int_bits == 32

    def test_nested(self) -> None:
        with lex_config_context(LexConfig(int_bits=16)):
            with lex_config_context(LexConfig(int_bits=8)):
                assert get_lex_config().int_bits == 8
            assert get_lex_config().int_bits == 16

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_lex_config().strict is False


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_thread_changes_do_not_leak(self) -> None:
        seen: list[int] = []

        def worker() -> None:
            set_lex_config(LexConfig(int_bits=8))
            seen.append(get_lex_config().int_bits)

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [8]
        assert get_lex_config().int_bits == 32
