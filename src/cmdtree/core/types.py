"""
Core type definitions for cmdtree.

This module contains the built-in keywords and the collaborator protocols
(handlers, output sinks, line readers) shared across the package.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

R = TypeVar("R")

HELP_KEYWORD = "help"
EXIT_KEYWORD = "exit"
CANCEL_KEYWORDS = ("cancel", "c")
DEFAULT_ROOT_KEYWORD = "root"

# Separator used by dotted class paths; actions are joined with a double separator
PATH_SEPARATOR = "."


@runtime_checkable
class OutputSink(Protocol):
    """Writable text destination handed to actions and the help printer."""

    def write(self, text: str) -> object: ...


@runtime_checkable
class LineReader(Protocol):
    """Source of input lines for the interactive loop.

    `read_line` returns None once input is exhausted.
    """

    def read_line(self, prompt: str) -> str | None: ...


ActionHandler = Callable[[Sequence[str], OutputSink], R]
