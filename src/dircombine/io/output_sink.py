"""Output file handling for combined output."""

import types
from pathlib import Path
from typing import Optional, TextIO, Type

from dircombine.types import PathType


class OutputSink:
    """Exclusive, truncating text writer for the combined output file.

    Missing parent directories are created when the sink is opened. Text is
    written as UTF-8 with ``\\n`` line endings on every platform. Nothing is rolled
    back on failure: whatever was written before an error stays in the file.

    Attributes:
        path (Path): Destination file path.

    Example:
        >>> with OutputSink("out/combined.txt") as sink:  # doctest: +SKIP
        ...     sink.write("Directory Structure:\\n\\n")
    """

    def __init__(self, path: PathType, encoding: str = "utf-8") -> None:
        """Create parent directories and open ``path`` for writing.

        Raises:
            OSError: If the directories or the file cannot be created.
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO = self.path.open("w", encoding=encoding, newline="")
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: str) -> None:
        """Write a string to the output file.

        Raises:
            ValueError: If the sink has been closed.
            OSError: If an I/O error occurs during writing.
        """
        if self._closed:
            raise ValueError("Cannot write to closed OutputSink")
        self._file.write(data)

    def close(self) -> None:
        """Flush and close the file. Calling this more than once is harmless."""
        if self._closed:
            return
        self._closed = True
        self._file.close()

    def __enter__(self) -> "OutputSink":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the file.

        A failure while closing is only raised when the ``with`` block itself
        completed normally; otherwise the original exception takes priority.
        """
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
