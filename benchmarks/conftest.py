"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_program() -> str:
    """Generate a large AtomScript program (~100KB)."""
    sections = []
    for i in range(1000):
        sections.append(f"""
atom value_{i} = {i};
molecule step_{i} = reaction(x, y) {{
    if (x < {i}) {{ produce x + y * {i}; }} else {{ produce !false; }}
}};
atom table_{i} = {{"key_{i}": [1, 2, {i}]}};
value_{i} == {i}; value_{i} != {i + 1};
""")
    return "".join(sections)


@pytest.fixture
def long_identifiers() -> str:
    """Many long identifier runs, stressing the identifier scan loop."""
    return " ".join(f"identifier_number_{i}_with_a_long_tail" for i in range(5000))
