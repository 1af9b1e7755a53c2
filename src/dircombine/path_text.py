"""Conversion of filesystem paths to printable text."""

import os

from dircombine.types import PathType


def lossy_text(path: PathType) -> str:
    """Return the text of ``path`` with undecodable bytes replaced by U+FFFD.

    Names that are not valid UTF-8 come back from the OS with surrogate escapes,
    which cannot be written to a UTF-8 file. Replacing them keeps every other
    character intact.

    Example:
        >>> lossy_text(os.fsdecode(b"proj/\\xff.txt"))  # doctest: +SKIP
        'proj/\\ufffd.txt'
        >>> lossy_text("proj/a.txt")
        'proj/a.txt'
    """
    return os.fsencode(path).decode("utf-8", "replace")
