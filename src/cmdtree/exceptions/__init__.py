"""
cmdtree exception classes.

This package provides all exception types used throughout cmdtree for
consistent error handling and reporting.
"""

from cmdtree.exceptions.core import (
    BuildError,
    BuilderFinalizedError,
    CmdTreeError,
    ConfigError,
    DeclarationError,
    InvalidNameError,
    NameExistsAsActionError,
    NameExistsAsClassError,
    NoParentError,
    ReservedNameError,
    UnclosedClassError,
)

__all__ = [
    "CmdTreeError",
    "ConfigError",
    "BuildError",
    "BuilderFinalizedError",
    "DeclarationError",
    "InvalidNameError",
    "NameExistsAsActionError",
    "NameExistsAsClassError",
    "NoParentError",
    "ReservedNameError",
    "UnclosedClassError",
]
