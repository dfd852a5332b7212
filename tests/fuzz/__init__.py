"""Fuzz testing infrastructure for BNFLexEngine.

This package contains:
- test_parser_fuzz: Never-raise and mutation properties of the line parser
- test_wide_lines: Alternation width and the line size limit

Run with: pytest -m fuzz

Python 3.13+.
"""
