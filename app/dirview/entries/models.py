"""Criteria and order keys for directory entry views.

This module defines the enumerations used to select and order the
entries of an EntrySet, plus the pipeline step type that lets a
sequence of transformations be described as data.
"""

from dataclasses import dataclass
from enum import Enum


class ItemFilter(str, Enum):
    """Kind of directory entry.

    Kinds are classified without following symbolic links, so a link
    to a file is a SYMLINK and never a FILE.

    Attributes:
        DIRECTORY: Directory.
        FILE: Regular file.
        SYMLINK: Symbolic link, whether or not its target exists.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


class VisibilityFilter(str, Enum):
    """Dotfile visibility of a directory entry.

    Attributes:
        HIDDEN: Name starts with a dot.
        VISIBLE: Name does not start with a dot.
    """

    HIDDEN = "hidden"
    VISIBLE = "visible"


class TextFilterBy(str, Enum):
    """Name component matched by a TextFilter."""

    NAME = "name"
    EXTENSION = "extension"


class OrderBy(str, Enum):
    """Sort key for EntrySet.order_by().

    All keys sort ascending; combine with reverse() for descending order.

    Attributes:
        EXTENSION: Extension, entries without one first.
        ITEM: Directories, then files, then symlinks.
        NAME: Full file name.
        SIZE: Size in bytes, unreadable entries counted as 0.
    """

    EXTENSION = "extension"
    ITEM = "item"
    NAME = "name"
    SIZE = "size"


@dataclass(frozen=True, slots=True)
class TextFilter:
    """Case-sensitive prefix match on an entry's name or extension.

    Attributes:
        by: Which component to match.
        prefix: Literal prefix the component must start with.
    """

    by: TextFilterBy
    prefix: str


Criterion = ItemFilter | VisibilityFilter | TextFilter


class StepAction(str, Enum):
    """Transformation applied by a PipelineStep."""

    FILTER = "filter"
    EXCLUDE = "exclude"
    ORDER = "order"
    REVERSE = "reverse"


@dataclass(frozen=True, slots=True)
class PipelineStep:
    """One transformation in an EntrySet pipeline.

    Attributes:
        action: Transformation to apply.
        criterion: Criterion for FILTER and EXCLUDE steps.
        key: Sort key for ORDER steps.
    """

    action: StepAction
    criterion: Criterion | None = None
    key: OrderBy | None = None

    def __post_init__(self) -> None:
        """Validate that the step carries the argument its action needs."""
        if self.action in (StepAction.FILTER, StepAction.EXCLUDE) and self.criterion is None:
            msg = f"{self.action.value} step requires a criterion"
            raise ValueError(msg)
        if self.action == StepAction.ORDER and self.key is None:
            msg = "order step requires a key"
            raise ValueError(msg)
