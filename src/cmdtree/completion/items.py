"""
Completion of tree paths and action arguments.

Completion is computed functionally from a commander's current position;
none of these functions move the cursor or call handlers.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdtree.core.path_utils import action_path, strip_root
from cmdtree.core.types import PATH_SEPARATOR
from cmdtree.parsing.parser import builtin_keywords, tokenize

if TYPE_CHECKING:
    from cmdtree.execution.commander import Commander


@dataclass(frozen=True)
class ActionMatch:
    """An action invokable from the current class.

    Params:
        match_str: Line prefix that selects the action, e.g. `"echo "`
        qualified_path: Action path relative to the root, e.g. `".path"` or `"nested..path"`
    """

    match_str: str
    qualified_path: str


def complete(commander: "Commander", line: str) -> list[str]:
    """
    Valid next words for a partially typed line at the current class.

    Candidates are child classes, then actions, then built-ins, keeping
    only those starting with the word being typed. Once the first word is
    followed by whitespace nothing is offered, since the rest of the line
    belongs to the action's arguments.

    Params:
        commander: Session whose current class is completed against
        line: Text typed so far

    Returns:
        Matching words in candidate order, without duplicates

    Examples:
        At a root with class "print" and action "clone":
        "" -> ["print", "clone", "help", "exit", "cancel", "c", "root"]
        "c" -> ["clone", "cancel", "c"]
        "print " -> []
    """
    words = tokenize(line)
    if len(words) > 1 or (words and line[-1:].isspace()):
        return []

    prefix = words[0] if words else ""
    current = commander.current_class
    candidates = current.child_names + list(builtin_keywords(commander.config.root_keyword))

    matches: list[str] = []
    for candidate in candidates:
        if candidate.startswith(prefix) and candidate not in matches:
            matches.append(candidate)
    return matches


def create_tree_completion_items(commander: "Commander") -> list[str]:
    """
    Space delimited paths of every class and action below the current class.

    Items follow `Commander.structure()`: depth first in declaration order,
    with a class's actions before its child classes. They are not sorted,
    so `print echo` comes before `print countdown` when `echo` was declared
    first. Sort the list if an alphabetical order is wanted.

    Examples:
        With root -> one -> two -> three (action) and root -> hello:
        at the root: ["one", "one two", "one two three", "hello"]
        after entering "one": ["two", "two three"]
    """
    cpath = commander.path + PATH_SEPARATOR
    items = []
    for item in commander.structure():
        if not item.path.startswith(cpath):
            continue
        words = [w for w in item.path[len(cpath) :].split(PATH_SEPARATOR) if w]
        if words:
            items.append(" ".join(words))
    return items


def tree_completions(line: str, items: Iterable[str]) -> Iterator[str]:
    """
    Items that could complete `line`, sliced from the line's final word.

    `items` should be constructed by `create_tree_completion_items`.

    Examples:
        items = ["one", "one two", "only"]
        tree_completions("o", items) -> "one", "one two", "only"
        tree_completions("one ", items) -> "two"
    """
    word_start = line.rfind(" ") + 1
    for item in items:
        if item.startswith(line):
            yield item[word_start:]


def create_action_completion_items(commander: "Commander") -> list[ActionMatch]:
    """
    One `ActionMatch` per action of the current class.

    Argument completers use these to tell which action a line targets:
    a line starting with `match_str` invokes the action at `qualified_path`.
    """
    owner = commander.path
    return [
        ActionMatch(
            match_str=f"{action.name} ",
            qualified_path=strip_root(action_path(owner, action.name), commander.root_name),
        )
        for action in commander.current_class.actions
    ]
