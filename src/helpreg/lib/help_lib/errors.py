"""
Exceptions raised by the help system.

Lookup misses are not errors: they come back as ``None``. These classes
cover the cases that must surface to the caller.
"""


class HelpError(Exception):
    """Base class for help system errors."""


class HelpFormatError(HelpError):
    """Raised when a content value has no rendering rule."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"No formatting rule applies to {value!r}")


class HelpConfigError(HelpError):
    """Raised when an extension provider's backing dependency is missing.

    Attributes:
        dependency: Name of the missing dependency
    """

    def __init__(self, dependency: str, message: str = None):
        self.dependency = dependency
        if message is None:
            message = f"Cannot enable help support: '{dependency}' is not available"
        super().__init__(message)


class HtmlWriteError(HelpError, OSError):
    """Raised when an HTML document cannot be written to disk."""

    def __init__(self, path, reason: str = None):
        self.path = path
        message = f"Could not open file to write: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
