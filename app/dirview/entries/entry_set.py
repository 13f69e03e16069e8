"""Filtered, ordered views over the children of one directory.

An EntrySet is an immutable snapshot of a directory's immediate
children. Every transformation returns a new EntrySet and leaves the
receiver untouched, so calls chain into pipelines:

    entries = EntrySet("/etc")
    largest_first = entries.exclude(VisibilityFilter.HIDDEN).order_by(OrderBy.SIZE).reverse()

Only the path list is captured at construction. Entry kind, size and
other metadata are read again each time a filter or sort key needs
them, so a view can disagree with the filesystem if it changes between
two calls.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from dirview.core.ordered_set import OrderedSet
from dirview.entries.metadata import (
    get_extension,
    get_item_kind,
    get_name,
    get_size,
    is_hidden,
)
from dirview.entries.models import (
    Criterion,
    ItemFilter,
    OrderBy,
    PipelineStep,
    StepAction,
    TextFilter,
    TextFilterBy,
    VisibilityFilter,
)
from dirview.exceptions import DirectoryUnreadableError

logger = logging.getLogger(__name__)

# Group order for OrderBy.ITEM
_ITEM_ORDER: tuple[ItemFilter, ...] = (
    ItemFilter.DIRECTORY,
    ItemFilter.FILE,
    ItemFilter.SYMLINK,
)


class EntrySet:
    """Ordered, duplicate-free view over a directory's immediate children.

    Args:
        directory: Directory whose children are listed (not recursive).

    Raises:
        DirectoryUnreadableError: If the directory cannot be listed.
    """

    __slots__ = ("_paths",)

    def __init__(self, directory: str | Path) -> None:
        self._paths: OrderedSet[Path] = _read_directory(Path(directory))

    @classmethod
    def from_directory(cls, directory: str | Path) -> "EntrySet":
        """Create an EntrySet from a directory listing."""
        return cls(directory)

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> "EntrySet":
        """Create an EntrySet from an explicit sequence of paths.

        Raises:
            DuplicateElementError: If paths contains the same path twice.
        """
        return cls._wrap(OrderedSet(paths))

    @classmethod
    def _wrap(cls, paths: OrderedSet[Path]) -> "EntrySet":
        entry_set = cls.__new__(cls)
        entry_set._paths = paths
        return entry_set

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def filter(self, criterion: Criterion) -> "EntrySet":
        """Keep only the entries matching a criterion.

        Entries whose metadata cannot be read do not match.

        Args:
            criterion: Entry kind, visibility, or text prefix to select.

        Returns:
            New EntrySet in the receiver's order.
        """
        predicate = _predicate_for(criterion)
        return self._wrap(OrderedSet(p for p in self._paths if predicate(p)))

    def exclude(self, criterion: Criterion) -> "EntrySet":
        """Drop the entries matching a criterion.

        Computed as the difference between the receiver and
        filter(criterion), so an entry that cannot be evaluated is kept.

        Args:
            criterion: Entry kind, visibility, or text prefix to drop.

        Returns:
            New EntrySet in the receiver's order.
        """
        return self._wrap(self._paths.difference(self.filter(criterion)._paths))

    def order_by(self, key: OrderBy) -> "EntrySet":
        """Reorder all entries by an ascending key.

        Sorting is stable: entries with equal keys keep their current
        relative order. OrderBy.ITEM groups directories, files, then
        symlinks and drops entries that are none of these.

        Args:
            key: Sort key.

        Returns:
            New, reordered EntrySet.
        """
        if key == OrderBy.ITEM:
            grouped: OrderedSet[Path] = OrderedSet()
            for kind in _ITEM_ORDER:
                grouped = grouped.union(self.filter(kind)._paths)
            return self._wrap(grouped)

        if key == OrderBy.EXTENSION:
            ordered = sorted(self._paths, key=_extension_key)
        elif key == OrderBy.NAME:
            ordered = sorted(self._paths, key=lambda p: get_name(p) or "")
        elif key == OrderBy.SIZE:
            ordered = sorted(self._paths, key=get_size)
        else:
            msg = f"Unknown order key: {key!r}"
            raise ValueError(msg)

        return self._wrap(OrderedSet(ordered))

    def reverse(self) -> "EntrySet":
        """Return a new EntrySet in exactly the reverse order."""
        return self._wrap(self._paths.reverse())

    def apply(self, steps: Iterable[PipelineStep]) -> "EntrySet":
        """Run a sequence of transformations in order.

        Args:
            steps: Pipeline steps to apply, first to last.

        Returns:
            EntrySet produced by the last step (a copy of the receiver
            if there are no steps).
        """
        result = self._wrap(self._paths.copy())
        for step in steps:
            logger.debug("Applying pipeline step %s", step)
            if step.action == StepAction.FILTER and step.criterion is not None:
                result = result.filter(step.criterion)
            elif step.action == StepAction.EXCLUDE and step.criterion is not None:
                result = result.exclude(step.criterion)
            elif step.action == StepAction.ORDER and step.key is not None:
                result = result.order_by(step.key)
            elif step.action == StepAction.REVERSE:
                result = result.reverse()
        return result

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def to_list(self) -> list[Path]:
        """Return a copy of the entry paths in current order."""
        return self._paths.to_list()

    def is_empty(self) -> bool:
        return not self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths.to_list())

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntrySet):
            return NotImplemented
        return self._paths == other._paths

    def __repr__(self) -> str:
        return f"EntrySet({[str(p) for p in self._paths]!r})"


def _read_directory(directory: Path) -> OrderedSet[Path]:
    """List the immediate children of a directory.

    Children that vanish between the listing and the check are skipped.

    Raises:
        DirectoryUnreadableError: If the directory cannot be listed.
    """
    try:
        children = list(directory.iterdir())
    except OSError as e:
        raise DirectoryUnreadableError(directory, e.strerror or str(e)) from e

    paths: OrderedSet[Path] = OrderedSet()
    for child in children:
        try:
            child.lstat()
        except OSError as e:
            logger.debug("Skipping unreadable entry %s: %s", child, e)
            continue
        paths.push(child)

    logger.debug("Read %d entries from %s", len(paths), directory)
    return paths


def _predicate_for(criterion: Criterion) -> Callable[[Path], bool]:
    """Build the path predicate for a filter criterion."""
    if isinstance(criterion, ItemFilter):
        return lambda p: get_item_kind(p) == criterion

    if isinstance(criterion, VisibilityFilter):
        want_hidden = criterion == VisibilityFilter.HIDDEN
        return lambda p: is_hidden(p) is want_hidden

    if isinstance(criterion, TextFilter):
        component = get_name if criterion.by == TextFilterBy.NAME else get_extension

        def _matches(path: Path) -> bool:
            value = component(path)
            return value is not None and value.startswith(criterion.prefix)

        return _matches

    msg = f"Unknown filter criterion: {criterion!r}"
    raise TypeError(msg)


def _extension_key(path: Path) -> tuple[bool, str]:
    """Sort key placing entries without an extension first."""
    extension = get_extension(path)
    if extension is None:
        return (False, "")
    return (True, extension)
