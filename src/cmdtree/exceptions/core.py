"""
Exception classes for cmdtree.

This module defines the exception types raised while building a command
tree and while loading configuration. Runtime resolution problems (unknown
words, empty lines) are never raised; they are reported as line results.
"""


class CmdTreeError(Exception):
    """Base exception for all cmdtree-related errors."""

    pass


class ConfigError(CmdTreeError):
    """Raised when a commander configuration is inconsistent."""

    def __init__(self, option: str, reason: str):
        """
        Initialize the exception.

        Params:
            option: Name of the offending configuration option
            reason: Why the value is rejected
        """
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid configuration '{option}': {reason}")


class BuildError(CmdTreeError):
    """Base exception for command tree construction failures."""

    pass


class DeclarationError(BuildError):
    """Base for errors tied to a single name declared inside a class.

    Params:
        name: The name passed to `begin_class` or `add_action`
        class_path: Dotted path of the class the name was declared in
    """

    def __init__(self, name: str, class_path: str, reason: str):
        self.name = name
        self.class_path = class_path
        self.reason = reason
        super().__init__(f"Cannot declare '{name}' in '{class_path}': {reason}")


class NameExistsAsClassError(DeclarationError):
    """Raised when the name is already used by a sibling class."""

    def __init__(self, name: str, class_path: str):
        super().__init__(name, class_path, "name already exists as a class")


class NameExistsAsActionError(DeclarationError):
    """Raised when the name is already used by a sibling action."""

    def __init__(self, name: str, class_path: str):
        super().__init__(name, class_path, "name already exists as an action")


class ReservedNameError(DeclarationError):
    """Raised when the name collides with a built-in command."""

    def __init__(self, name: str, class_path: str):
        super().__init__(name, class_path, "name is reserved for a built-in command")


class InvalidNameError(DeclarationError):
    """Raised when the name cannot be typed as a single input word."""

    pass


class NoParentError(BuildError):
    """Raised when `end_class` is called on the root class.

    This usually occurs when `end_class` is called too many times.
    """

    def __init__(self, root_name: str):
        self.root_name = root_name
        super().__init__(f"Class '{root_name}' is the root and has no parent to return to")


class UnclosedClassError(BuildError):
    """Raised when finalizing a builder that is still inside a nested class
    and auto-closing is disabled."""

    def __init__(self, class_path: str, open_classes: int):
        self.class_path = class_path
        self.open_classes = open_classes
        super().__init__(
            f"Cannot finalize while inside '{class_path}': "
            f"{open_classes} class(es) still open, call end_class() or root() first"
        )


class BuilderFinalizedError(BuildError):
    """Raised when a builder is used after `into_commander` succeeded."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call {operation}(): builder already finalized")
