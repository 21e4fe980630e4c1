"""
Class path utilities for cmdtree.

A position in the command tree is recorded as the sequence of class names
leading from the root to the current class. This module provides the
mutable cursor built on that representation and the helpers that render
qualified paths for classes and actions.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from cmdtree.core.tree_node import SubClass
from cmdtree.core.types import PATH_SEPARATOR

logger = logging.getLogger(__name__)


def class_path(names: Iterable[str]) -> str:
    """
    Join class names into a dotted class path.

    Examples:
        ["root", "print"] -> "root.print"
    """
    return PATH_SEPARATOR.join(names)


def action_path(owner_path: str, action_name: str) -> str:
    """
    Qualified path of an action declared in the class at `owner_path`.

    The action name is joined with a doubled separator so actions and
    classes of the same name never share a path.

    Examples:
        ("root.nested", "path") -> "root.nested..path"
        ("root", "path") -> "root..path"
    """
    return f"{owner_path}{PATH_SEPARATOR}{PATH_SEPARATOR}{action_name}"


def strip_root(path: str, root_name: str) -> str:
    """
    Remove the leading root name (and its separator) from a qualified path.

    Examples:
        ("root.nested..path", "root") -> "nested..path"
        ("root..path", "root") -> ".path"
        ("root", "root") -> ""
    """
    if path == root_name:
        return ""
    prefix = root_name + PATH_SEPARATOR
    if path.startswith(prefix):
        return path[len(prefix) :]
    return path


@dataclass
class ClassPath:
    """
    Cursor recording the current class as a path of names from the root.

    The first element is always the root name. The cursor does not validate
    names on `push`; callers only push names already matched against the
    current class.
    """

    names: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.names:
            raise ValueError("ClassPath requires at least the root name")

    @classmethod
    def at_root(cls, root_name: str) -> "ClassPath":
        return cls(names=[root_name])

    @property
    def root_name(self) -> str:
        return self.names[0]

    @property
    def depth(self) -> int:
        """Number of classes entered below the root."""
        return len(self.names) - 1

    @property
    def is_root(self) -> bool:
        return len(self.names) == 1

    @property
    def current_name(self) -> str:
        return self.names[-1]

    def push(self, name: str) -> None:
        """Enter the child class `name` of the current class."""
        self.names.append(name)
        logger.debug("entered class %s", self.dotted())

    def pop(self) -> bool:
        """
        Leave the current class for its parent.

        Returns:
            True if the cursor moved, False when already at the root
        """
        if self.is_root:
            return False
        self.names.pop()
        logger.debug("returned to class %s", self.dotted())
        return True

    def truncate(self) -> bool:
        """
        Return to the root class.

        Returns:
            True if the cursor moved, False when already at the root
        """
        if self.is_root:
            return False
        del self.names[1:]
        logger.debug("returned to root %s", self.root_name)
        return True

    def resolve(self, root: SubClass) -> SubClass:
        """
        Walk the tree from `root` along the recorded names.

        Params:
            root: Root class of the tree this cursor belongs to

        Returns:
            The class the cursor points at

        Raises:
            LookupError: If a recorded name is not a child class of its predecessor
        """
        current = root
        for name in self.names[1:]:
            child = current.find_class(name)
            if child is None:
                raise LookupError(
                    f"Class '{name}' does not exist in '{current.name}' "
                    f"(path {self.dotted()})"
                )
            current = child
        return current

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self.names)

    def dotted(self) -> str:
        return class_path(self.names)

    def __str__(self) -> str:
        return self.dotted()
