"""Hypothesis strategies for BNF line syntax.

Strategies producing grammar-valid text return the non-terminal names they
used alongside the text, so tests can check the completion index and
traversal without re-parsing.
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

# =============================================================================
# Constants
# =============================================================================

# nonTerminal := '<' letter (letter | digit | '-')* '>'
BNF_SYMBOL_FIRST_CHARS = string.ascii_letters
BNF_SYMBOL_REST_CHARS = string.ascii_letters + string.digits + "-"

# Literal bodies: printable ASCII plus a few multi-byte characters.
# Each literal strategy removes its own closing quote.
_LITERAL_CHARS = string.ascii_letters + string.digits + " !#$%&()*+,-./:;<=>?@[]^_`{|}~'\"" + (
    "éü世’"
)

# Comment bodies: anything except line terminators.
_COMMENT_CHARS = _LITERAL_CHARS + "\t"


# =============================================================================
# Lexical Strategies
# =============================================================================


def bnf_whitespace(max_size: int = 2) -> st.SearchStrategy[str]:
    """ws := (' ')*"""
    return st.text(alphabet=" ", max_size=max_size)


@composite
def bnf_symbol_names(draw: st.DrawFn) -> str:
    """Generate non-terminal names: [A-Za-z][A-Za-z0-9-]*"""
    first = draw(st.sampled_from(BNF_SYMBOL_FIRST_CHARS))
    rest = draw(st.text(alphabet=BNF_SYMBOL_REST_CHARS, max_size=12))
    return first + rest


@composite
def bnf_non_terminals(draw: st.DrawFn) -> tuple[str, str]:
    """Generate ``<name>`` and its name."""
    name = draw(bnf_symbol_names())
    return f"<{name}>", name


@composite
def bnf_literals(draw: st.DrawFn) -> str:
    """Generate quoted literals; the body may contain the other quote."""
    quote = draw(st.sampled_from(['"', "'"]))
    body = draw(st.text(alphabet=_LITERAL_CHARS.replace(quote, ""), max_size=16))
    return f"{quote}{body}{quote}"


@composite
def bnf_atoms(draw: st.DrawFn) -> tuple[str, str | None]:
    """Generate an atom and the non-terminal name it uses (None for literals)."""
    if draw(st.booleans()):
        return draw(bnf_non_terminals())
    return draw(bnf_literals()), None


@composite
def bnf_comments(draw: st.DrawFn) -> str:
    """comment := ';' (byte-except-EOL)*"""
    return ";" + draw(st.text(alphabet=_COMMENT_CHARS, max_size=24))


# =============================================================================
# Grammar Strategies
# =============================================================================


@composite
def _bnf_lists(draw: st.DrawFn) -> tuple[str, list[str]]:
    """list := atom (ws atom)*"""
    atoms = draw(st.lists(bnf_atoms(), min_size=1, max_size=4))
    parts = [atoms[0][0]]
    for text, _ in atoms[1:]:
        # Keep at least one space so two literals never merge visually
        parts.append(" " + draw(bnf_whitespace(1)) + text)
    names = [name for _, name in atoms if name is not None]
    return "".join(parts), names


@composite
def bnf_expressions(draw: st.DrawFn) -> tuple[str, list[str], int]:
    """expression := list (ws? "|" ws? expression)?

    Returns:
        (text, non-terminal names in order, number of alternatives)
    """
    arms = draw(st.lists(_bnf_lists(), min_size=1, max_size=4))
    text = arms[0][0]
    names = list(arms[0][1])
    for arm_text, arm_names in arms[1:]:
        text += draw(bnf_whitespace()) + "|" + draw(bnf_whitespace()) + arm_text
        names.extend(arm_names)
    return text, names, len(arms)


@composite
def bnf_rules(draw: st.DrawFn) -> tuple[str, list[str]]:
    """rule := nonTerminal ws? "::=" ws? expression

    Returns:
        (text, non-terminal names in order, defined name first)
    """
    head, name = draw(bnf_non_terminals())
    body, names, alternatives = draw(bnf_expressions())
    event(f"alternatives={alternatives}")
    text = head + draw(bnf_whitespace()) + "::=" + draw(bnf_whitespace()) + body
    return text, [name, *names]


@composite
def bnf_lines(draw: st.DrawFn) -> tuple[str, list[str]]:
    """Generate a full line holding one rule.

    statement := ws? rule ws? comment? lineEnd
    """
    rule, names = draw(bnf_rules())
    line = draw(bnf_whitespace()) + rule
    if draw(st.booleans()):
        event("comment=trailing")
        line += draw(bnf_whitespace()) + draw(bnf_comments())
    line += draw(bnf_whitespace())
    line += draw(st.sampled_from(["", "\n", "\r\n"]))
    return line, names
