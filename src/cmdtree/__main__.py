"""
Command-line entry point: `cmdtree-demo` / `python -m cmdtree`.

Runs the demo command tree interactively, or executes the lines of a script
file in batch mode.
"""

import argparse
import logging
import sys
from dataclasses import replace

from rich.console import Console
from rich.text import Text

from cmdtree.config import CommanderConfig
from cmdtree.demo import build_demo
from cmdtree.execution.io import ScriptReader
from cmdtree.execution.results import LineKind, LineResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdtree-demo",
        description="Navigate a demo command tree: enter 'print', then try 'echo' or 'countdown'.",
    )
    parser.add_argument(
        "--script",
        metavar="FILE",
        help="execute the lines of FILE instead of reading from the terminal",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="YAML file with commander configuration overrides",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable coloured prompts and messages"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = CommanderConfig.from_yaml(args.config) if args.config else CommanderConfig()
    if args.no_color:
        config = replace(config, colorize=False)

    commander = build_demo(config)
    errors = Console(stderr=True, highlight=False, color_system="auto" if config.colorize else None)
    failures = 0

    def report(result: LineResult) -> None:
        nonlocal failures
        if result.kind is LineKind.ACTION and isinstance(result.value, str):
            failures += 1
            errors.print(Text(result.value, style="bright_red"))

    reader = None
    if args.script:
        reader = ScriptReader.from_file(args.script, echo=sys.stdout)

    commander.run(reader=reader, on_result=report)
    return 1 if args.script and failures else 0


if __name__ == "__main__":
    sys.exit(main())
