"""
Example command tree used by the `cmdtree-demo` program.

The tree has a `print` class with two actions:
    echo       writes its arguments joined by spaces
    countdown  writes the integers from N down to 0, one per line

Handlers return None on success and a usage message when their arguments
are wrong.
"""

from collections.abc import Sequence

from cmdtree.config import CommanderConfig
from cmdtree.core.types import OutputSink
from cmdtree.execution.commander import Commander
from cmdtree.structure.builder import Builder


def echo(args: Sequence[str], out: OutputSink) -> str | None:
    out.write(" ".join(args) + "\n")
    return None


def countdown(args: Sequence[str], out: OutputSink) -> str | None:
    if len(args) != 1:
        return "usage: countdown <non-negative integer>"
    try:
        start = int(args[0])
    except ValueError:
        return f"countdown: '{args[0]}' is not an integer"
    if start < 0:
        return "usage: countdown <non-negative integer>"
    for n in range(start, -1, -1):
        out.write(f"{n}\n")
    return None


def build_demo(config: CommanderConfig | None = None) -> Commander[str | None]:
    """Build the demo commander rooted at `cmdtree-demo`."""
    return (
        Builder[str | None]("cmdtree-demo", config)
        .begin_class("print", "printing actions")
        .add_action("echo", "echo the arguments back", echo)
        .add_action("countdown", "count down from a number to zero", countdown)
        .end_class()
        .into_commander()
    )
