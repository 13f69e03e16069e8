"""Exception hierarchy for dirview.

All errors raised by the library derive from DirviewError so callers
can catch them with a single except clause.
"""

from pathlib import Path


class DirviewError(Exception):
    """Base exception for dirview errors."""


class DirectoryUnreadableError(DirviewError):
    """Raised when a directory cannot be opened for listing.

    Covers missing directories, permission errors, and paths that
    are not directories.

    Attributes:
        directory: The directory that could not be listed.
    """

    def __init__(self, directory: Path, reason: str) -> None:
        self.directory = directory
        super().__init__(f"Cannot read directory {directory}: {reason}")


class DuplicateElementError(DirviewError, ValueError):
    """Raised when an ordered set would contain the same element twice.

    Attributes:
        item: The offending element.
    """

    def __init__(self, item: object) -> None:
        self.item = item
        super().__init__(f"Element already present in set: {item!r}")


class ConfigError(DirviewError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""
