"""
Core cmdtree components.

This package provides the fundamental building blocks of a command tree:
node types, the class path cursor, and shared type definitions.
"""

from cmdtree.core.path_utils import ClassPath, action_path, class_path, strip_root
from cmdtree.core.tree_node import Action, SubClass
from cmdtree.core.types import (
    CANCEL_KEYWORDS,
    DEFAULT_ROOT_KEYWORD,
    EXIT_KEYWORD,
    HELP_KEYWORD,
    PATH_SEPARATOR,
    ActionHandler,
    LineReader,
    OutputSink,
)

__all__ = [
    "Action",
    "SubClass",
    "ClassPath",
    "action_path",
    "class_path",
    "strip_root",
    "ActionHandler",
    "LineReader",
    "OutputSink",
    "CANCEL_KEYWORDS",
    "DEFAULT_ROOT_KEYWORD",
    "EXIT_KEYWORD",
    "HELP_KEYWORD",
    "PATH_SEPARATOR",
]
