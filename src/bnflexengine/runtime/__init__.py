"""BNF runtime package.

Consumers of parsed lines: highlighting, buffer mirroring and the
non-terminal completion index. Depends on syntax package for parsing.

Python 3.13+.
"""

from .completion import CompletionIndex
from .document import Document, LineHighlight
from .highlighter import HighlightRange, group_of, highlight_line
from .rwlock import RWLock

__all__ = [
    "CompletionIndex",
    "Document",
    "HighlightRange",
    "LineHighlight",
    "RWLock",
    "group_of",
    "highlight_line",
]
