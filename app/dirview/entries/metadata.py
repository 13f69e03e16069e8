"""Link-aware metadata reads for directory entries.

Every function here reads live filesystem state at call time and
recovers from per-entry failures locally: an entry whose metadata
cannot be read has no kind and a size of zero.
"""

import logging
import stat
from pathlib import Path

from dirview.entries.models import ItemFilter

logger = logging.getLogger(__name__)


def get_item_kind(path: Path) -> ItemFilter | None:
    """Classify a path without following symbolic links.

    Args:
        path: Path to classify.

    Returns:
        The entry kind, or None if the metadata cannot be read or the
        entry is some other kind (FIFO, socket, device).
    """
    try:
        mode = path.lstat().st_mode
    except OSError as e:
        logger.debug("Cannot read metadata of %s: %s", path, e)
        return None

    if stat.S_ISLNK(mode):
        return ItemFilter.SYMLINK
    if stat.S_ISDIR(mode):
        return ItemFilter.DIRECTORY
    if stat.S_ISREG(mode):
        return ItemFilter.FILE
    return None


def get_size(path: Path) -> int:
    """Get the size in bytes of a path without following symbolic links.

    Args:
        path: Path to measure.

    Returns:
        Size in bytes, or 0 if the metadata cannot be read.
    """
    try:
        return path.lstat().st_size
    except OSError as e:
        logger.debug("Cannot read size of %s: %s", path, e)
        return 0


def get_name(path: Path) -> str | None:
    """Get the final name component of a path.

    Returns:
        The file name, or None for paths without one (e.g. "/").
    """
    return path.name or None


def get_extension(path: Path) -> str | None:
    """Get the extension of a path, without the leading dot.

    The extension is the text after the last dot of the file name,
    unless that dot is the first character: ".bashrc" has no extension,
    ".hidden.txt" has "txt" and "trailing." has the empty extension.

    Returns:
        The extension, or None if the name has none.
    """
    name = get_name(path)
    if name is None:
        return None
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def is_hidden(path: Path) -> bool | None:
    """Check the dotfile convention for a path.

    Returns:
        True if the name starts with a dot, False if it does not, None
        if the path has no name component.
    """
    name = get_name(path)
    if name is None:
        return None
    return name.startswith(".")
