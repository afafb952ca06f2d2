import logging
from typing import FrozenSet

from streaming.errors import IgnoreListIOError

logger = logging.getLogger(__name__)


def read_ignore_list(path: str) -> FrozenSet[str]:
    """
    Read an ignore-list file: one word per line, blank lines skipped,
    words lowercased and duplicates collapsed.
    Raises IgnoreListIOError if the file cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return frozenset(line.strip().lower() for line in f if line.strip())
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreListIOError(f"cannot read ignore list {path!r}: {e}") from e


def load_ignore_list(path: str) -> FrozenSet[str]:
    """Like read_ignore_list, but falls back to an empty set (with a warning) on read errors."""
    try:
        words = read_ignore_list(path)
    except IgnoreListIOError as e:
        logger.warning("%s; continuing without an ignore list", e)
        return frozenset()
    logger.debug("Loaded %d ignored words from %s", len(words), path)
    return words
