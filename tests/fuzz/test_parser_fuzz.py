"""Parser fuzzer - arbitrary and mutated lines.

Properties checked on every input:
1. BNFParser.parse never raises
2. Degraded results always carry a diagnostic inside the line
3. Every reported range lies inside the line and ranges do not overlap
4. Parsing is deterministic

Run with:
    pytest -m fuzz tests/fuzz/test_parser_fuzz.py

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from bnflexengine.runtime import CompletionIndex, highlight_line
from bnflexengine.syntax import parse
from bnflexengine.syntax.ast import AST, DegradedAST
from tests.strategies import bnf_lines

# Mark entire module as fuzz tests
pytestmark = pytest.mark.fuzz

_BNF_BYTES = b'<>"\';:=| \n\r\x00abz09-\xc3\xa4'


def _check_invariants(line: bytes, ast: AST) -> None:
    if not ast.is_strict:
        error = ast.diagnostic()
        assert error is not None
        assert 0 <= error.position <= len(line)

    previous_end = 0
    for highlight in highlight_line(ast, 0):
        assert previous_end <= highlight.begin < highlight.end <= len(line)
        previous_end = highlight.end


@st.composite
def _mutated_lines(draw: st.DrawFn) -> bytes:
    """Valid line with a few bytes inserted, deleted or replaced."""
    line, _ = draw(bnf_lines())
    data = bytearray(line.encode())
    for _ in range(draw(st.integers(min_value=1, max_value=3))):
        index = draw(st.integers(min_value=0, max_value=len(data)))
        op = draw(st.sampled_from(["insert", "delete", "replace"]))
        event(f"mutation={op}")
        byte = draw(st.sampled_from(_BNF_BYTES))
        if op == "insert":
            data.insert(index, byte)
        elif index < len(data):
            if op == "delete":
                del data[index]
            else:
                data[index] = byte
    return bytes(data)


class TestParserFuzz:
    """Never-raise properties."""

    @given(st.binary(max_size=512))
    @settings(max_examples=2000, deadline=None)
    def test_arbitrary_bytes(self, line: bytes) -> None:
        ast = parse(line)
        event(f"mode={ast.mode}")
        _check_invariants(line, ast)

    @given(st.lists(st.sampled_from(_BNF_BYTES), max_size=128).map(bytes))
    @settings(max_examples=2000, deadline=None)
    def test_grammar_alphabet(self, line: bytes) -> None:
        ast = parse(line)
        event(f"mode={ast.mode}")
        _check_invariants(line, ast)

    @given(_mutated_lines())
    @settings(
        max_examples=1000, deadline=None, suppress_health_check=[HealthCheck.too_slow]
    )
    def test_mutated_valid_lines(self, line: bytes) -> None:
        ast = parse(line)
        event(f"mode={ast.mode}")
        _check_invariants(line, ast)

        again = parse(line)
        if isinstance(ast, DegradedAST):
            # Exceptions compare by identity; compare what they describe
            assert isinstance(again, DegradedAST)
            assert again.groups == ast.groups
            first, second = ast.diagnostic(), again.diagnostic()
            assert first is not None
            assert second is not None
            assert second.describe() == first.describe()
        else:
            assert again == ast

    @given(_mutated_lines())
    @settings(max_examples=500, deadline=None)
    def test_index_only_grows(self, line: bytes) -> None:
        index = CompletionIndex()
        index.record_usage("seed")

        index.update_from(parse(line))

        assert index.count("seed") >= 1
        assert all(count > 0 for count in index.snapshot().values())
