"""
cmdtree - navigable command trees for interactive command-line applications

cmdtree builds nested classes of named actions and runs them as a shell in
which the user moves between classes and invokes actions by name.
"""

from importlib.metadata import version

from cmdtree.config import CommanderConfig
from cmdtree.execution import Commander, LineKind, LineResult
from cmdtree.structure import Builder, ItemType, StructureItem

__version__ = version("cmdtree")

__all__ = [
    "__version__",
    "Builder",
    "Commander",
    "CommanderConfig",
    "ItemType",
    "LineKind",
    "LineResult",
    "StructureItem",
]
