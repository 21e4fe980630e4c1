"""
Line results produced by a commander.

A `LineResult` describes what one input line did. It is created fresh for
each line and never stored by the commander.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic

from cmdtree.core.types import R


class LineKind(Enum):
    """Outcome of executing one line."""

    ACTION = "action"
    CLASS = "class"
    ROOT = "root"
    CANCEL = "cancel"
    HELP = "help"
    UNRECOGNIZED = "unrecognized"
    EMPTY = "empty"
    EXIT = "exit"


@dataclass(frozen=True)
class LineResult(Generic[R]):
    """Result of one parse-execute cycle.

    Params:
        kind: What the line did
        name: The matched class or action name, or the unrecognized word
        value: Return value of the action handler for ACTION results
    """

    kind: LineKind
    name: str | None = None
    value: R | None = None

    @classmethod
    def action(cls, name: str, value: R) -> "LineResult[R]":
        return cls(kind=LineKind.ACTION, name=name, value=value)

    @classmethod
    def entered(cls, name: str) -> "LineResult[R]":
        return cls(kind=LineKind.CLASS, name=name)

    @classmethod
    def unrecognized(cls, word: str) -> "LineResult[R]":
        return cls(kind=LineKind.UNRECOGNIZED, name=word)

    @property
    def is_exit(self) -> bool:
        return self.kind is LineKind.EXIT

    @property
    def is_error(self) -> bool:
        """True for lines that matched nothing."""
        return self.kind in (LineKind.UNRECOGNIZED, LineKind.EMPTY)

    def __str__(self) -> str:
        if self.name is None:
            return self.kind.value
        return f"{self.kind.value}({self.name})"
