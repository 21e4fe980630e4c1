"""
Builder for cmdtree command trees.

To construct a `Commander` a `Builder` is used. It chains the common
operations while constructing the shape of the tree:

    cmder = (
        Builder.default_config("cmdtree-example")
        .begin_class("class1", "class1 help message")
        .begin_class("inner-class1", "nested class!")
        .add_action("name", "print class name", lambda args, out: out.write("inner-class1\n"))
        .end_class()
        .end_class()
        .into_commander()
    )

Every name is validated as soon as it is declared, so a `BuildError` points
at the offending call rather than at `into_commander`.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic

from cmdtree.config import CommanderConfig
from cmdtree.core.path_utils import class_path
from cmdtree.core.tree_node import Action, SubClass
from cmdtree.core.types import ActionHandler, R
from cmdtree.exceptions import (
    BuilderFinalizedError,
    NoParentError,
    UnclosedClassError,
)
from cmdtree.structure.utils import check_names, normalize_name, validate_name_format

if TYPE_CHECKING:
    from cmdtree.execution.commander import Commander

logger = logging.getLogger(__name__)


@dataclass
class ClassDraft:
    """A class still under construction; frozen into a `SubClass` when closed."""

    name: str
    help: str
    classes: list[SubClass] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)

    def freeze(self) -> SubClass:
        return SubClass(
            name=self.name,
            help=self.help,
            classes=tuple(self.classes),
            actions=tuple(self.actions),
        )


class Builder(Generic[R]):
    """Construction context for a command tree.

    Holds the class currently being built and the stack of its open
    parents. The builder is single use: once `into_commander` succeeds the
    tree is frozen and any further call raises `BuilderFinalizedError`.

    The type parameter is the return type shared by every action handler
    in the tree.
    """

    def __init__(self, root_name: str, config: CommanderConfig | None = None):
        """
        Initialise a builder positioned at a new, empty root class.

        Params:
            root_name: Name of the root class, shown in prompts and paths
            config: Finalization and presentation options, defaults to `CommanderConfig()`

        Raises:
            InvalidNameError: If the root name is not a single word
        """
        self._config = config or CommanderConfig()
        root_name = normalize_name(root_name)
        validate_name_format(root_name, "<root>")
        self._parents: list[ClassDraft] = []
        self._current = ClassDraft(name=root_name, help=self._config.root_help)
        self._finalized = False

    @classmethod
    def default_config(cls, root_name: str) -> "Builder":
        """Initialise a `Builder` with the default configuration."""
        return cls(root_name)

    @property
    def config(self) -> CommanderConfig:
        return self._config

    @property
    def depth(self) -> int:
        """Number of classes currently open below the root."""
        return len(self._parents)

    @property
    def class_path(self) -> str:
        """Dotted path of the class under construction."""
        return class_path([p.name for p in self._parents] + [self._current.name])

    def begin_class(self, name: str, help_msg: str = "") -> "Builder[R]":
        """
        Start a new nested class and descend into it.

        Params:
            name: Class name, unique among the current class's children
            help_msg: Help text shown by the `help` built-in

        Returns:
            This builder, positioned inside the new class

        Raises:
            BuildError: If the name is invalid, reserved, or already declared here
        """
        self._ensure_open("begin_class")
        name = normalize_name(name)
        check_names(name, self._current, self._config.reserved_names, self.class_path)
        self._parents.append(self._current)
        self._current = ClassDraft(name=name, help=help_msg)
        logger.debug("begin class %s", self.class_path)
        return self

    def end_class(self) -> "Builder[R]":
        """
        Close the current class and move to its parent.

        Raises:
            NoParentError: If called on the root class
        """
        self._ensure_open("end_class")
        if not self._parents:
            raise NoParentError(self._current.name)
        closed = self._current
        self._current = self._parents.pop()
        self._current.classes.append(closed.freeze())
        logger.debug("end class %s", closed.name)
        return self

    def add_action(
        self, name: str, help_msg: str, handler: ActionHandler
    ) -> "Builder[R]":
        """
        Add an action to the current class.

        The handler is called as `handler(args, sink)` where `args` is the
        list of words following the action name and `sink` is the writable
        output destination of the session.

        Raises:
            BuildError: If the name is invalid, reserved, or already declared here
        """
        self._ensure_open("add_action")
        name = normalize_name(name)
        check_names(name, self._current, self._config.reserved_names, self.class_path)
        if not callable(handler):
            raise TypeError(f"Handler for action '{name}' must be callable")
        self._current.actions.append(Action(name=name, help=help_msg, handler=handler))
        logger.debug("add action %s..%s", self.class_path, name)
        return self

    def root(self) -> "Builder[R]":
        """Navigate to the root class, closing out the classes on the way."""
        self._ensure_open("root")
        while self._parents:
            self.end_class()
        return self

    def into_commander(self) -> "Commander[R]":
        """
        Finish construction and return a commander positioned at the root.

        If classes are still open they are closed when
        `config.auto_close_classes` is set, otherwise finalization fails.

        Raises:
            UnclosedClassError: If classes are open and auto-closing is disabled
            BuilderFinalizedError: If the builder was already finalized
        """
        from cmdtree.execution.commander import Commander

        self._ensure_open("into_commander")
        if self._parents:
            if not self._config.auto_close_classes:
                raise UnclosedClassError(self.class_path, len(self._parents))
            self.root()

        tree = self._current.freeze()
        self._finalized = True
        logger.debug("finalized command tree %s", tree.name)
        return Commander(tree, config=self._config)

    def _ensure_open(self, operation: str) -> None:
        if self._finalized:
            raise BuilderFinalizedError(operation)
