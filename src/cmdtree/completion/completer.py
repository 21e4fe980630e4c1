"""
prompt_toolkit completer over a commander's current class.
"""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from cmdtree.completion.items import complete, create_action_completion_items

if TYPE_CHECKING:
    from cmdtree.execution.commander import Commander


class TreeCompleter(Completer):
    """
    Tab completer for the first word of a line, with optional per-action
    argument completion.

    Params:
        commander: Session to complete against; its position is read on every keystroke
        arg_completers: Completers for action arguments keyed by the action's
            root-relative qualified path (e.g. `".path"` or `"nested..path"`)
    """

    def __init__(
        self,
        commander: "Commander",
        arg_completers: Mapping[str, Completer] | None = None,
    ):
        self._commander = commander
        self._arg_completers = dict(arg_completers or {})

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        line = text.lstrip()

        if self._arg_completers:
            for match in create_action_completion_items(self._commander):
                completer = self._arg_completers.get(match.qualified_path)
                if completer is not None and line.startswith(match.match_str):
                    arg_text = line[len(match.match_str) :]
                    arg_document = Document(arg_text, cursor_position=len(arg_text))
                    yield from completer.get_completions(arg_document, complete_event)
                    return

        word = document.get_word_before_cursor(WORD=True)
        current = self._commander.current_class
        for candidate in complete(self._commander, text):
            node = current.find_class(candidate) or current.find_action(candidate)
            yield Completion(
                candidate,
                start_position=-len(word),
                display_meta=node.help if node is not None else "built-in",
            )
