"""
Commander configuration for cmdtree.

This module provides the options that shape how a command tree is finalized
and how an interactive session is presented.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from cmdtree.core.types import (
    CANCEL_KEYWORDS,
    DEFAULT_ROOT_KEYWORD,
    EXIT_KEYWORD,
    HELP_KEYWORD,
)
from cmdtree.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommanderConfig:
    """Configuration for building and running a commander.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        config = CommanderConfig()

        # Refuse to finalize a builder that is still inside a class
        config = CommanderConfig(auto_close_classes=False)

        # From YAML file
        config = CommanderConfig.from_yaml("cmdtree.yaml")
    """

    root_help: str = "base class of commander tree"
    # into_commander() closes open classes instead of raising UnclosedClassError
    auto_close_classes: bool = True
    # Built-in that returns straight to the root class
    root_keyword: str = DEFAULT_ROOT_KEYWORD
    prompt_suffix: str = "=> "
    colorize: bool = True
    history_file: str | None = None

    def __post_init__(self):
        keyword = self.root_keyword
        if not keyword or any(ch.isspace() for ch in keyword):
            raise ConfigError("root_keyword", "must be a single non-empty word")
        if keyword in (HELP_KEYWORD, EXIT_KEYWORD, *CANCEL_KEYWORDS):
            raise ConfigError(
                "root_keyword", f"'{keyword}' already names another built-in command"
            )

    @property
    def reserved_names(self) -> frozenset[str]:
        """Words no class or action may be called."""
        return frozenset(
            {HELP_KEYWORD, EXIT_KEYWORD, *CANCEL_KEYWORDS, self.root_keyword}
        )

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> CommanderConfig:
        """Build a config from option overrides; omitted options keep their defaults.

        Keys that are not options are skipped with a warning, so one file
        can carry settings for other tools as well.

        Raises:
            ConfigError: If `config` is not a mapping, or an option value is rejected
        """
        if not isinstance(config, Mapping):
            raise ConfigError(
                "<document>",
                f"expected a mapping of option names to values, got {type(config).__name__}",
            )

        valid_fields = {f.name for f in dataclass_fields(cls)}
        ignored = sorted(str(k) for k in config if k not in valid_fields)
        if ignored:
            logger.warning("ignoring unknown commander options: %s", ", ".join(ignored))
        return cls(**{k: v for k, v in config.items() if k in valid_fields})

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> CommanderConfig:
        """Load overrides from a YAML mapping; an empty file gives the defaults.

        Example YAML:
            auto_close_classes: false
            root_keyword: home
            history_file: ~/.cmdtree_history

        Raises:
            ConfigError: If the document is not a mapping or holds a rejected value
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f)

        if config is None:
            return cls()
        if not isinstance(config, Mapping):
            raise ConfigError(
                str(path), f"top level must be a mapping of options, got {type(config).__name__}"
            )
        return cls.from_dict(config)
