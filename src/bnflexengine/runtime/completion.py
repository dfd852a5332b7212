"""Completion index of non-terminal usage counts.

Every strictly parsed line adds one to the count of each non-terminal it
mentions, including the one it defines. Counts never go down: editing or
deleting a line does not retract earlier usages, so frequently typed
symbols stay at the top of completion lists for the whole session.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from bnflexengine.constants import DEFAULT_COMPLETION_LIMIT
from bnflexengine.runtime.rwlock import RWLock
from bnflexengine.syntax.ast import AST, Node, NonTerminal

__all__ = ["CompletionIndex"]

logger = logging.getLogger(__name__)


def _symbol_name(name: str | bytes) -> str:
    if isinstance(name, bytes):
        return name.decode("utf-8", errors="replace")
    return name


class CompletionIndex:
    """Mapping from non-terminal name to number of times it was seen.

    Owned by the caller (one per editor session or document set) and
    passed to whatever feeds it parse results.

    Thread Safety:
        All methods are thread-safe. Reads share an RWLock; updates take it
        exclusively, so concurrent update_from() calls never lose counts.

    Example:
        >>> from bnflexengine.syntax import parse
        >>> index = CompletionIndex()
        >>> index.update_from(parse("<a> ::= <b>"))
        2
        >>> index.update_from(parse("<c> ::= <b>"))
        2
        >>> index.count("b")
        2
        >>> index.complete("")
        ('b', 'a', 'c')
    """

    __slots__ = ("_counts", "_rwlock")

    def __init__(self) -> None:
        """Initialize an empty index."""
        self._counts: dict[str, int] = {}
        self._rwlock = RWLock()

    def __len__(self) -> int:
        with self._rwlock.read():
            return len(self._counts)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, bytes)):
            return False
        with self._rwlock.read():
            return _symbol_name(name) in self._counts

    def record_usage(self, name: str | bytes) -> None:
        """Count one more usage of ``name``.

        Safe to call any number of times; never fails.
        """
        key = _symbol_name(name)
        with self._rwlock.write():
            self._counts[key] = self._counts.get(key, 0) + 1

    def record_all(self, names: Iterable[str | bytes]) -> int:
        """Count one usage of each name under a single lock acquisition.

        Returns:
            Number of usages recorded
        """
        keys = [_symbol_name(name) for name in names]
        with self._rwlock.write():
            for key in keys:
                self._counts[key] = self._counts.get(key, 0) + 1
        return len(keys)

    def count(self, name: str | bytes) -> int:
        """Usage count of ``name`` (0 if never seen)."""
        with self._rwlock.read():
            return self._counts.get(_symbol_name(name), 0)

    def snapshot(self) -> dict[str, int]:
        """Copy of all counts at this point in time."""
        with self._rwlock.read():
            return dict(self._counts)

    def complete(
        self, prefix: str | bytes = "", limit: int = DEFAULT_COMPLETION_LIMIT
    ) -> tuple[str, ...]:
        """Names starting with ``prefix``, most used first.

        Ties are broken alphabetically so results are stable.

        Args:
            prefix: Typed part of the symbol name (without ``<``)
            limit: Maximum number of candidates (0 or less returns none)

        Returns:
            Candidate names
        """
        if limit <= 0:
            return ()
        key = _symbol_name(prefix)
        with self._rwlock.read():
            candidates = [(name, n) for name, n in self._counts.items() if name.startswith(key)]
        candidates.sort(key=lambda item: (-item[1], item[0]))
        return tuple(name for name, _ in candidates[:limit])

    def update_from(self, ast: AST) -> int:
        """Record every non-terminal of a strictly parsed line.

        Degraded ASTs are ignored: their tokens come from a line that does
        not parse, and counting them would promote half-typed names.

        Returns:
            Number of usages recorded
        """
        if not ast.is_strict:
            logger.debug("Skipping completion update for degraded line")
            return 0

        names: list[bytes] = []

        def collect(node: Node) -> None:
            if NonTerminal.guard(node):
                names.append(node.name)

        ast.traverse(collect)
        recorded = self.record_all(names)
        logger.debug("Recorded %d non-terminal usages", recorded)
        return recorded

    def clear(self) -> None:
        """Forget all counts."""
        with self._rwlock.write():
            self._counts.clear()
