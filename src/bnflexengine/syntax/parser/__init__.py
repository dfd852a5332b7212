"""BNF line parser module.

This module provides the dispatcher, the strict parser and the permissive
tokenizer, organized into focused submodules.

Module Organization:
- core.py: BNFParser dispatcher and StrictParser
- primitives.py: Byte predicates and scanners shared by both strategies
- rules.py: Grammar rules of the strict parser
- tokenizer.py: Permissive fallback tokenizer

Public API:
    BNFParser: Never-failing line parser
    StrictParser: Grammar-aware parser (raises PositionedError)
    ParseContext: Parse context for failure tracking (advanced usage)
    tokenize: Permissive tokenizer
"""

from bnflexengine.syntax.parser.core import BNFParser, StrictParser
from bnflexengine.syntax.parser.rules import ParseContext
from bnflexengine.syntax.parser.tokenizer import tokenize

__all__ = ["BNFParser", "ParseContext", "StrictParser", "tokenize"]
