"""Iterative in-order traversal of the binary BNF AST.

Every node exposes ``left()`` and ``right()``, so one stack-based walk covers
all node kinds. No recursion: a rule with thousands of alternatives is walked
without touching the interpreter's recursion limit.

NOTE: ASTVisitor follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case). See: https://docs.python.org/3/library/ast.html#ast.NodeVisitor

Python 3.13+.
"""

from collections.abc import Callable, Iterable
from typing import ClassVar

from .ast import DegradedAST, Node, StrictAST, VisitorFunc

__all__ = ["ASTVisitor", "traverse", "traverse_all"]


def traverse[R](root: Node | None, visit: VisitorFunc[R]) -> tuple[int, R | None]:
    """Walk a tree in order, calling ``visit`` on each node.

    Algorithm: push the root; while the top of the stack is a node, push its
    left child. When the top is None, pop it; if a node remains, pop it,
    visit it, and push its right child in its place.

    Args:
        root: Tree to walk (None walks nothing)
        visit: Callback; returning anything but None stops the walk

    Returns:
        (number of nodes visited, the stopping result or None)

    Example:
        >>> from bnflexengine.syntax import parse
        >>> ast = parse('<a> ::= <b> | "c"')
        >>> names = []
        >>> ast.traverse(lambda node: names.append(node.kind) or None)[0]
        6
    """
    stack: list[Node | None] = [root]
    count = 0
    while stack:
        top = stack[-1]
        if top is not None:
            stack.append(top.left())
            continue
        stack.pop()
        if not stack:
            break
        node = stack.pop()
        assert node is not None  # Type narrowing: only nodes sit under a None
        count += 1
        result = visit(node)
        if result is not None:
            return count, result
        stack.append(node.right())
    return count, None


def traverse_all[R](roots: Iterable[Node], visit: VisitorFunc[R]) -> tuple[int, R | None]:
    """Traverse several trees in sequence, summing the visit counts.

    Stops at the first non-None visit result. An empty iterable yields
    ``(0, None)``.
    """
    total = 0
    for root in roots:
        count, result = traverse(root, visit)
        total += count
        if result is not None:
            return total, result
    return total, None


class ASTVisitor[T]:
    """Base visitor dispatching on node class name.

    Override ``visit_<NodeClass>`` methods. Returning None continues the
    walk; any other value stops it and becomes the walk's result.

    Example:
        >>> class CountSymbols(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_NonTerminal(self, node):
        ...         self.count += 1
        ...
        >>> visitor = CountSymbols()
        >>> _ = visitor.walk_ast(parse("<a> ::= <b> <c>"))
        >>> visitor.count
        3
    """

    __slots__ = ("_instance_dispatch_cache",)

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self) -> None:
        self._instance_dispatch_cache: dict[type, Callable[[Node], T | None]] = {}

    def visit(self, node: Node) -> T | None:
        """Dispatch to ``visit_<NodeClass>`` or ``generic_visit``."""
        node_type = type(node)
        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        node_type_name = node_type.__name__
        if node_type_name in self._class_visit_methods:
            method = getattr(self, self._class_visit_methods[node_type_name])
        else:
            method = self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def generic_visit(self, node: Node) -> T | None:  # noqa: ARG002
        """Default: continue the walk."""
        return None

    def walk(self, root: Node | None) -> tuple[int, T | None]:
        """Traverse one tree with this visitor."""
        return traverse(root, self.visit)

    def walk_ast(self, ast: StrictAST | DegradedAST) -> tuple[int, T | None]:
        """Traverse every root of a parse result with this visitor."""
        return ast.traverse(self.visit)
