"""Benchmark lexer throughput.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

import pytest

from atomscript import Lexer, tokenize


@pytest.mark.benchmark(group="lexer")
def test_benchmark_tokenize_program(benchmark, large_program):
    """Tokenize a large mixed program into a list."""
    tokens = benchmark(tokenize, large_program)
    assert not any(t.is_error for t in tokens)


@pytest.mark.benchmark(group="lexer")
def test_benchmark_next_token_loop(benchmark, large_program):
    """Drive next_token() directly, discarding tokens."""

    def scan():
        for _ in Lexer(large_program).tokenize():
            pass

    benchmark(scan)


@pytest.mark.benchmark(group="lexer")
def test_benchmark_identifiers(benchmark, long_identifiers):
    """Identifier-heavy input."""
    tokens = benchmark(tokenize, long_identifiers)
    assert len(tokens) == 5001
