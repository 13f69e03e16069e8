"""dirview - filtered, ordered views over directory entries."""

from dirview.core.ordered_set import OrderedSet
from dirview.entries import (
    EntrySet,
    ItemFilter,
    OrderBy,
    PipelineStep,
    StepAction,
    TextFilter,
    TextFilterBy,
    VisibilityFilter,
)
from dirview.exceptions import DirectoryUnreadableError, DirviewError, DuplicateElementError

__version__ = "0.1.0"

__all__ = [
    "DirectoryUnreadableError",
    "DirviewError",
    "DuplicateElementError",
    "EntrySet",
    "ItemFilter",
    "OrderBy",
    "OrderedSet",
    "PipelineStep",
    "StepAction",
    "TextFilter",
    "TextFilterBy",
    "VisibilityFilter",
    "__version__",
]
