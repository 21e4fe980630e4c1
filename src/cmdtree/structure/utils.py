"""
Name validation helpers for command tree construction.

This module contains the checks applied to every class and action name
before it is attached to a class under construction.
"""

from typing import TYPE_CHECKING

from cmdtree.core.types import PATH_SEPARATOR
from cmdtree.exceptions import (
    InvalidNameError,
    NameExistsAsActionError,
    NameExistsAsClassError,
    ReservedNameError,
)

if TYPE_CHECKING:
    from cmdtree.structure.builder import ClassDraft


def normalize_name(name: str) -> str:
    """Names are matched in lowercase; input words are not folded."""
    return name.lower() if isinstance(name, str) else name


def validate_name_format(name: str, class_path: str) -> None:
    """
    Validate that a name can be typed as exactly one input word.

    Params:
        name: Normalized class or action name
        class_path: Dotted path of the class receiving the name, for error reporting

    Raises:
        InvalidNameError: If the name is empty or contains whitespace or the path separator
    """
    if not name or not isinstance(name, str):
        raise InvalidNameError(str(name), class_path, "must be a non-empty string")

    if any(ch.isspace() for ch in name):
        raise InvalidNameError(name, class_path, "must not contain whitespace")

    if PATH_SEPARATOR in name:
        raise InvalidNameError(
            name, class_path, f"must not contain the path separator '{PATH_SEPARATOR}'"
        )


def check_names(
    name: str, draft: "ClassDraft", reserved: frozenset[str], class_path: str
) -> None:
    """
    Check a normalized name against the reserved words and the draft's siblings.

    Params:
        name: Normalized name about to be declared
        draft: The class under construction that will own the name
        reserved: Built-in command words
        class_path: Dotted path of `draft`, for error reporting

    Raises:
        InvalidNameError: If the name cannot be typed as a single word
        ReservedNameError: If the name is a built-in command
        NameExistsAsActionError: If a sibling action has the name
        NameExistsAsClassError: If a sibling class has the name
    """
    validate_name_format(name, class_path)

    if name in reserved:
        raise ReservedNameError(name, class_path)

    if any(action.name == name for action in draft.actions):
        raise NameExistsAsActionError(name, class_path)

    if any(subclass.name == name for subclass in draft.classes):
        raise NameExistsAsClassError(name, class_path)
