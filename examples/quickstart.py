"""Quickstart example for bnflexengine.

This example demonstrates parsing BNF lines, walking the AST, highlighting
a buffer and completing non-terminal names.

Note: Examples print diagnostics instead of showing them in an editor. An
editor plugin would render LineHighlight.diagnostic as virtual text.
"""

from bnflexengine import BNFParser, CompletionIndex, Document, parse
from bnflexengine.diagnostics import DiagnosticFormatter, OutputFormat
from bnflexengine.syntax.ast import NonTerminal

# Example 1: Strict parse
print("=" * 50)
print("Example 1: Strict Parse")
print("=" * 50)

ast = parse('<month> ::= "January" | "February"')
print(ast.mode, ast.rule_count())
# Output: strict 1

# Example 2: In-order traversal
print("\n" + "=" * 50)
print("Example 2: Traversal")
print("=" * 50)

count, _ = ast.traverse(lambda node: print(f"  {node.kind}") or None)
print(f"visited {count} nodes")
# Output: non_terminal, assignment, terminal, alternative, terminal, statement

# Example 3: Degraded parse
print("\n" + "=" * 50)
print("Example 3: Degraded Parse")
print("=" * 50)

broken = parse('<a> ::= "unterminated')
print(broken.mode, [token.text for token in broken.tokens])
# Output: degraded ['a', '::=']

error = broken.diagnostic()
if error is not None:
    print(error.describe())
    # Output: terminal is expected at position 9
    if error.diagnostic is not None:
        print(DiagnosticFormatter().format(error.diagnostic))
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(error.diagnostic))

# Example 4: Parser limits
print("\n" + "=" * 50)
print("Example 4: Parser Limits")
print("=" * 50)

wide = parse("<digit> ::= " + " | ".join(f'"{n}"' for n in range(5000)))
print(wide.mode, wide.traverse(lambda node: None)[0])
# Output: strict 10002

small_parser = BNFParser(max_line_size=16)
long_line = small_parser.parse('<a> ::= "more than sixteen bytes"')
print(long_line.mode, long_line.diagnostic())

# Example 5: Document highlighting and completion
print("\n" + "=" * 50)
print("Example 5: Document")
print("=" * 50)

index = CompletionIndex()
document = Document(
    [
        b'<personal-part> ::= <initial> "." | <first-name>',
        b"<name-part> ::= <personal-part> <last-name>",
        b"<first-name> ::= <fir",
    ],
    index=index,
)

for line in document.highlight():
    groups = ", ".join(f"{r.begin}-{r.end}:{r.group}" for r in line.ranges)
    print(f"line {line.line}: {groups}")
    if line.diagnostic is not None:
        print(f"  {line.diagnostic}")
        print(f"  {line.detail}")

print(document.complete_at(2, 21))
# Output: ('first-name',)

symbols: list[str] = []
ast = parse("<name-part> ::= <personal-part> <last-name>")
ast.traverse(lambda node: symbols.append(node.text) if isinstance(node, NonTerminal) else None)
print(symbols)
# Output: ['name-part', 'personal-part', 'last-name']
print(index.complete("p"))
# Output: ('personal-part',)
