"""
The commander: runtime for a finalized command tree.

A `Commander` pairs an immutable tree with the cursor of one session. It
resolves input lines against the cursor's class, applies the resulting
navigation, invokes matched actions, and reports what happened as a
`LineResult`. The interactive loop is layered on top of `execute` and is
the only place an exit request ends anything.
"""

import logging
import sys
from collections.abc import Callable
from typing import Generic

from cmdtree.completion.completer import TreeCompleter
from cmdtree.config import CommanderConfig
from cmdtree.core.path_utils import ClassPath
from cmdtree.core.tree_node import SubClass
from cmdtree.core.types import LineReader, OutputSink, R
from cmdtree.execution.io import Presenter, PromptToolkitReader
from cmdtree.execution.results import LineKind, LineResult
from cmdtree.parsing.parser import WordKind, resolve_words, tokenize
from cmdtree.structure.export import StructureItem, build_structure

logger = logging.getLogger(__name__)


class Commander(Generic[R]):
    """Session over a command tree.

    The tree is shared and never modified; the cursor belongs to this
    session alone. Use `session()` to obtain another independent session
    over the same tree.

    Responsibilities:
    - Tokenize and resolve one line at a time against the current class
    - Move the cursor on class entry, cancel, and return to root
    - Invoke action handlers and carry their return value in the result
    - Run the interactive read loop until exit or end of input

    Handler exceptions are not caught: they propagate out of `execute` and
    `run`, and leave the cursor where it was.
    """

    def __init__(
        self,
        tree: SubClass,
        config: CommanderConfig | None = None,
        sink: OutputSink | None = None,
    ):
        """
        Params:
            tree: Root class of a finalized tree
            config: Presentation options; the builder passes its own
            sink: Default output for handlers and help, stdout when None
        """
        self._tree = tree
        self._config = config or CommanderConfig()
        self._sink = sink
        self._cursor = ClassPath.at_root(tree.name)

    @property
    def tree(self) -> SubClass:
        return self._tree

    @property
    def config(self) -> CommanderConfig:
        return self._config

    @property
    def root_name(self) -> str:
        return self._tree.name

    @property
    def cursor(self) -> ClassPath:
        return self._cursor

    @property
    def current_class(self) -> SubClass:
        return self._cursor.resolve(self._tree)

    @property
    def path(self) -> str:
        """Dotted path of the current class, e.g. `root.print`."""
        return self._cursor.dotted()

    @property
    def prompt(self) -> str:
        """Name of the current class."""
        return self._cursor.current_name

    @property
    def sink(self) -> OutputSink:
        return self._sink if self._sink is not None else sys.stdout

    def session(self, sink: OutputSink | None = None) -> "Commander[R]":
        """A new session at the root of the same tree."""
        return Commander(self._tree, config=self._config, sink=sink or self._sink)

    def structure(self) -> list[StructureItem]:
        """Shape of the whole tree; see `build_structure`."""
        return build_structure(self._tree)

    def reset(self) -> None:
        """Move the cursor back to the root class."""
        self._cursor.truncate()

    def execute(self, line: str, sink: OutputSink | None = None) -> LineResult[R]:
        """
        Resolve and execute one line.

        Class entry consumes only the first word; words after a class
        name are ignored. Unrecognized and empty lines leave the cursor
        untouched. Nothing is printed here apart from what an action
        handler writes itself.

        Params:
            line: Raw input line
            sink: Output handed to an action handler, defaults to the commander's sink

        Returns:
            LineResult describing what the line did

        Raises:
            Exception: Whatever an action handler raises, unchanged
        """
        resolved = resolve_words(
            self.current_class, tokenize(line), self._config.root_keyword
        )
        logger.debug("line %r resolved as %s at %s", line, resolved.kind.value, self.path)

        kind = resolved.kind
        if kind is WordKind.EMPTY:
            return LineResult(kind=LineKind.EMPTY)
        elif kind is WordKind.HELP:
            return LineResult(kind=LineKind.HELP)
        elif kind is WordKind.EXIT:
            return LineResult(kind=LineKind.EXIT)
        elif kind is WordKind.CANCEL:
            self._cursor.pop()
            return LineResult(kind=LineKind.CANCEL)
        elif kind is WordKind.ROOT:
            self._cursor.truncate()
            return LineResult(kind=LineKind.ROOT)
        elif kind is WordKind.CLASS:
            self._cursor.push(resolved.subclass.name)
            return LineResult.entered(resolved.subclass.name)
        elif kind is WordKind.ACTION:
            action = resolved.action
            out = sink if sink is not None else self.sink
            return LineResult.action(action.name, action.call(resolved.arguments, out))

        logger.warning("unrecognized word %r at %s", resolved.word, self.path)
        return LineResult.unrecognized(resolved.word)

    def parse_line(
        self, line: str, colorize: bool | None = None, sink: OutputSink | None = None
    ) -> LineResult[R]:
        """
        Execute one line and print help or error messages for it.

        Params:
            line: Raw input line
            colorize: Colour the printed messages, defaults to `config.colorize`
            sink: Output for the handler and the messages, defaults to the commander's sink

        Returns:
            LineResult describing what the line did
        """
        out = sink if sink is not None else self.sink
        result = self.execute(line, sink=out)
        presenter = Presenter(
            out, colorize=self._config.colorize if colorize is None else colorize
        )
        presenter.render(result, self.current_class, self._config.root_keyword)
        return result

    def run(
        self,
        reader: LineReader | None = None,
        sink: OutputSink | None = None,
        on_result: Callable[[LineResult[R]], None] | None = None,
    ) -> None:
        """
        Run the interactive loop until `exit` or end of input.

        Blocks the calling thread. Each line is passed through `parse_line`.

        Params:
            reader: Line source, an interactive prompt_toolkit reader with tab
                completion when None
            sink: Output for handlers and messages, defaults to the commander's sink
            on_result: Called with every line result, e.g. to report action return values
        """
        if reader is None:
            reader = PromptToolkitReader(
                completer=TreeCompleter(self),
                history_file=self._config.history_file,
                colorize=self._config.colorize,
            )

        logger.debug("interactive loop started at %s", self.path)
        while True:
            line = reader.read_line(f"{self.path}{self._config.prompt_suffix}")
            if line is None:
                logger.debug("end of input, leaving interactive loop")
                break
            result = self.parse_line(line, sink=sink)
            if on_result is not None:
                on_result(result)
            if result.is_exit:
                logger.debug("exit requested, leaving interactive loop")
                break
