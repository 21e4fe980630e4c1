"""
cmdtree completion.

This package offers advisory completion queries over a commander's current
position and a prompt_toolkit completer built on them.
"""

from cmdtree.completion.completer import TreeCompleter
from cmdtree.completion.items import (
    ActionMatch,
    complete,
    create_action_completion_items,
    create_tree_completion_items,
    tree_completions,
)

__all__ = [
    "ActionMatch",
    "TreeCompleter",
    "complete",
    "create_action_completion_items",
    "create_tree_completion_items",
    "tree_completions",
]
