"""
Read-only export of a command tree's shape.

Consumers building their own help screens or completion engines use this
listing instead of walking the node classes directly.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from cmdtree.core.path_utils import action_path, class_path
from cmdtree.core.tree_node import SubClass


class ItemType(str, Enum):
    """Kind of entry in a structure listing."""

    CLASS = "class"
    ACTION = "action"


class StructureItem(BaseModel):
    """One class or action of a command tree.

    Params:
        path: Qualified path from the root, e.g. `root.print` or `root.print..echo`
        name: The class or action name
        help: Help text declared with the item
        item_type: Whether the item is a class or an action
        depth: Number of classes between the root and the item
    """

    model_config = ConfigDict(frozen=True)

    path: str
    name: str
    help: str
    item_type: ItemType
    depth: int


def build_structure(root: SubClass) -> list[StructureItem]:
    """
    List every class and action below `root` in depth-first order.

    Within a class its actions are listed first, then each child class
    followed by that class's own contents. The root itself is not listed.

    Params:
        root: Root class of the tree

    Returns:
        Structure items in depth-first declaration order
    """
    items: list[StructureItem] = []
    _collect(root, [root.name], items)
    return items


def _collect(node: SubClass, names: list[str], items: list[StructureItem]) -> None:
    owner = class_path(names)
    depth = len(names) - 1
    for action in node.actions:
        items.append(
            StructureItem(
                path=action_path(owner, action.name),
                name=action.name,
                help=action.help,
                item_type=ItemType.ACTION,
                depth=depth,
            )
        )
    for child in node.classes:
        child_names = names + [child.name]
        items.append(
            StructureItem(
                path=class_path(child_names),
                name=child.name,
                help=child.help,
                item_type=ItemType.CLASS,
                depth=depth + 1,
            )
        )
        _collect(child, child_names, items)
