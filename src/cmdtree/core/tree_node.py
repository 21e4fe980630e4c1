"""
Command tree nodes for cmdtree.

This module contains the immutable node types a finalized command tree is
made of: classes (nested namespaces) and actions (leaf commands).
"""

from collections.abc import Sequence

from attrs import field, frozen

from cmdtree.core.types import ActionHandler, OutputSink


@frozen
class Action:
    """A leaf command owning the handler that runs when its name is typed."""

    name: str
    help: str
    handler: ActionHandler = field(eq=False, repr=False)

    def call(self, arguments: Sequence[str], sink: OutputSink):
        """Invoke the handler with the words following the action name."""
        return self.handler(list(arguments), sink)


@frozen
class SubClass:
    """A namespace holding child classes and actions, in declaration order.

    Nodes only link downwards; the position of a class in the tree is
    tracked by the caller as a path of names from the root.
    """

    name: str
    help: str
    classes: tuple["SubClass", ...] = ()
    actions: tuple[Action, ...] = ()

    def find_class(self, name: str) -> "SubClass | None":
        return next((c for c in self.classes if c.name == name), None)

    def find_action(self, name: str) -> Action | None:
        return next((a for a in self.actions if a.name == name), None)

    @property
    def child_names(self) -> list[str]:
        """Names of child classes followed by action names."""
        return [c.name for c in self.classes] + [a.name for a in self.actions]
