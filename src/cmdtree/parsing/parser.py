"""
Input line resolution for cmdtree.

This module turns one line of user input into a classification of what the
line refers to, relative to the class the session is currently in. It is
pure: nothing is mutated and no handler is invoked here.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from cmdtree.core.tree_node import Action, SubClass
from cmdtree.core.types import (
    CANCEL_KEYWORDS,
    DEFAULT_ROOT_KEYWORD,
    EXIT_KEYWORD,
    HELP_KEYWORD,
)

logger = logging.getLogger(__name__)


class WordKind(Enum):
    """What the first word of a line refers to."""

    EMPTY = "empty"
    HELP = "help"
    EXIT = "exit"
    CANCEL = "cancel"
    ROOT = "root"
    CLASS = "class"
    ACTION = "action"
    UNRECOGNIZED = "unrecognized"


BUILTIN_KINDS = frozenset(
    {WordKind.HELP, WordKind.EXIT, WordKind.CANCEL, WordKind.ROOT}
)


@dataclass(frozen=True)
class WordResult:
    """Resolution of a tokenized line against one class.

    Params:
        kind: Classification of the first word
        word: The first word, None for empty input
        subclass: Matched child class for CLASS results
        action: Matched action for ACTION results
        arguments: Words after the action name for ACTION results
        discarded: Words ignored after a class name or built-in
    """

    kind: WordKind
    word: str | None = None
    subclass: SubClass | None = None
    action: Action | None = None
    arguments: tuple[str, ...] = ()
    discarded: tuple[str, ...] = ()

    @property
    def is_builtin(self) -> bool:
        return self.kind in BUILTIN_KINDS


def tokenize(line: str) -> list[str]:
    """
    Split a line into words on runs of whitespace.

    There is no quoting or escaping; line breaks and tabs separate words
    like spaces do.

    Examples:
        "  echo hello   world\\r\\n" -> ["echo", "hello", "world"]
        "" -> []
    """
    return line.split()


def builtin_keywords(root_keyword: str = DEFAULT_ROOT_KEYWORD) -> dict[str, WordKind]:
    """Map every built-in word to its kind."""
    keywords = {HELP_KEYWORD: WordKind.HELP, EXIT_KEYWORD: WordKind.EXIT}
    for word in CANCEL_KEYWORDS:
        keywords[word] = WordKind.CANCEL
    keywords[root_keyword] = WordKind.ROOT
    return keywords


def resolve_words(
    subclass: SubClass,
    words: list[str],
    root_keyword: str = DEFAULT_ROOT_KEYWORD,
) -> WordResult:
    """
    Resolve the first word of a line against `subclass`.

    Resolution order, using exact case-sensitive comparison only:
      1. No words: EMPTY
      2. A built-in word: HELP, EXIT, CANCEL or ROOT, whatever the class contains
      3. A child class name: CLASS; the remaining words are discarded
      4. An action name: ACTION; the remaining words become its arguments
      5. Anything else: UNRECOGNIZED

    A line therefore performs at most one navigation or one action; it
    never enters a class and then continues resolving inside it.

    Params:
        subclass: The class the session is currently in
        words: Tokenized input line
        root_keyword: Built-in word that returns to the root class

    Returns:
        WordResult describing the line
    """
    if not words:
        return WordResult(kind=WordKind.EMPTY)

    word, rest = words[0], tuple(words[1:])

    builtin = builtin_keywords(root_keyword).get(word)
    if builtin is not None:
        return WordResult(kind=builtin, word=word, discarded=rest)

    child = subclass.find_class(word)
    if child is not None:
        if rest:
            logger.debug(
                "entering class %s, ignoring trailing words %s", child.name, list(rest)
            )
        return WordResult(kind=WordKind.CLASS, word=word, subclass=child, discarded=rest)

    action = subclass.find_action(word)
    if action is not None:
        return WordResult(kind=WordKind.ACTION, word=word, action=action, arguments=rest)

    return WordResult(kind=WordKind.UNRECOGNIZED, word=word, discarded=rest)
