"""
cmdtree input parsing.

This package tokenizes input lines and resolves them against the class a
session is currently in.
"""

from cmdtree.parsing.parser import (
    BUILTIN_KINDS,
    WordKind,
    WordResult,
    builtin_keywords,
    resolve_words,
    tokenize,
)

__all__ = [
    "BUILTIN_KINDS",
    "WordKind",
    "WordResult",
    "builtin_keywords",
    "resolve_words",
    "tokenize",
]
