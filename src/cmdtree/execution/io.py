"""
Terminal collaborators for the interactive loop.

Line readers supply input lines; the presenter renders line results (help
listings and error messages) to an output sink. Neither takes part in
resolution.
"""

import io
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory, InMemoryHistory
from rich.console import Console
from rich.text import Text

from cmdtree.core.tree_node import SubClass
from cmdtree.core.types import (
    CANCEL_KEYWORDS,
    EXIT_KEYWORD,
    HELP_KEYWORD,
    OutputSink,
)
from cmdtree.execution.results import LineKind, LineResult

logger = logging.getLogger(__name__)


class ScriptReader:
    """Line reader over a fixed sequence of lines, for batch runs and tests.

    Params:
        lines: Lines to hand out in order
        echo: Sink that receives each prompt and line as it is read, or None
    """

    def __init__(self, lines: Iterable[str], echo: OutputSink | None = None):
        self._lines = iter(lines)
        self._echo = echo

    @classmethod
    def from_file(cls, path: str | Path, echo: OutputSink | None = None) -> "ScriptReader":
        with Path(path).open() as f:
            lines = [line.rstrip("\n") for line in f]
        return cls(lines, echo=echo)

    def read_line(self, prompt: str) -> str | None:
        line = next(self._lines, None)
        if line is not None and self._echo is not None:
            self._echo.write(f"{prompt}{line}\n")
        return line


class PromptToolkitReader:
    """Interactive line reader backed by a prompt_toolkit session.

    Owns editing and history. Ctrl-C discards the current line and gives a
    fresh prompt; Ctrl-D ends input.

    Params:
        completer: Tab completer consulted while typing, or None
        history_file: File to persist history in; in-memory history when None
        colorize: Render the prompt in bright cyan
    """

    def __init__(
        self,
        completer: Completer | None = None,
        history_file: str | Path | None = None,
        colorize: bool = True,
    ):
        if history_file:
            history = FileHistory(str(Path(history_file).expanduser()))
        else:
            history = InMemoryHistory()
        self._colorize = colorize
        self._session = PromptSession(
            completer=completer,
            history=history,
            auto_suggest=AutoSuggestFromHistory(),
        )

    def read_line(self, prompt: str) -> str | None:
        message = FormattedText([("ansibrightcyan" if self._colorize else "", prompt)])
        try:
            return self._session.prompt(message)
        except KeyboardInterrupt:
            return ""
        except EOFError:
            return None


class Presenter:
    """Renders line results that carry no handler output of their own.

    Help is listed for the current class; unrecognized words produce an
    error line. Other results print nothing.

    Rendering happens on a private buffer and the finished text is handed
    to `sink.write`, so the sink needs no other method. Colours are only
    emitted when `colorize` is set and the sink is a terminal.
    """

    def __init__(self, sink: OutputSink | None = None, colorize: bool = True):
        self._sink = sink
        self.console = Console(
            file=io.StringIO(),
            force_terminal=colorize and _is_terminal(self.sink),
            highlight=False,
            soft_wrap=True,
            color_system="auto" if colorize else None,
        )

    @property
    def sink(self) -> OutputSink:
        return self._sink if self._sink is not None else sys.stdout

    def render(self, result: LineResult, subclass: SubClass, root_keyword: str) -> None:
        if result.kind is LineKind.HELP:
            self.print_help(subclass, root_keyword)
        elif result.kind is LineKind.UNRECOGNIZED:
            self.print_unrecognized(result.name)

    def print_unrecognized(self, word: str) -> None:
        self._emit(
            Text(f"'{word}' does not match any keywords, classes, or actions", style="bright_red")
        )

    def print_help(self, subclass: SubClass, root_keyword: str) -> None:
        """Print the built-ins, then the classes and actions of `subclass`."""
        out = Text()
        out.append(f"{subclass.name}", style="bold bright_cyan")
        if subclass.help:
            out.append(f": {subclass.help}")
        out.append("\n")
        out.append(help_line(HELP_KEYWORD, "prints the help messages"))
        out.append(help_line(" | ".join(CANCEL_KEYWORDS), "returns to the parent class"))
        out.append(help_line(root_keyword, "returns to the root class"))
        out.append(help_line(EXIT_KEYWORD, "sends the exit signal to end the interactive loop"))

        if subclass.classes:
            out.append("Classes:\n", style="bold")
            for child in subclass.classes:
                out.append(help_line(child.name, child.help, indent="    "))

        if subclass.actions:
            out.append("Actions:\n", style="bold")
            for action in subclass.actions:
                out.append(help_line(action.name, action.help, indent="    "))

        self._emit(out, end="")

    def _emit(self, text: Text, end: str = "\n") -> None:
        with self.console.capture() as capture:
            self.console.print(text, end=end)
        self.sink.write(capture.get())


def _is_terminal(sink: OutputSink) -> bool:
    isatty = getattr(sink, "isatty", None)
    return bool(isatty is not None and isatty())


def help_line(name: str, help_msg: str, indent: str = "") -> Text:
    line = Text(indent)
    line.append(name, style="bright_yellow")
    if help_msg:
        line.append(f" -- {help_msg}")
    line.append("\n")
    return line
