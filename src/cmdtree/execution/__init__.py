"""
cmdtree runtime.

This package contains the commander that executes input lines against a
command tree, its line results, and the terminal collaborators used by the
interactive loop.
"""

from cmdtree.execution.commander import Commander
from cmdtree.execution.io import Presenter, PromptToolkitReader, ScriptReader
from cmdtree.execution.results import LineKind, LineResult

__all__ = [
    "Commander",
    "LineKind",
    "LineResult",
    "Presenter",
    "PromptToolkitReader",
    "ScriptReader",
]
