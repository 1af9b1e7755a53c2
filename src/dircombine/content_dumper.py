"""File content dumping.

This module walks a directory a second time, independently of the tree diagram,
and produces one path-headed text block per regular file. It consults the same
exclusion rules as the tree pass so both sections list the same entries.
"""

import os
from pathlib import Path
from typing import Iterator, Optional, TextIO, Tuple

from .exceptions import ContentDecodingError
from .exclusion_rules.base_rules import BaseExclusionRules
from .file_system_tree.file_identifier import FileIdentifier
from .file_system_tree.file_system_tree import is_ancestor_loop, list_directory
from .path_text import lossy_text
from .types import PathType


class ContentDumper:
    """Streams the text contents of every non-excluded file under a root directory.

    Files are visited depth-first in pre-order with siblings sorted by path, so the
    order is the same on every run over an unchanged tree and matches the order of
    the tree diagram. Symbolic links are followed; a symlink back into one of its
    own ancestors is not descended.

    Each file produces a block of the form::

        === relative/path ===

        <contents>

    followed by a blank line. Files are read whole, with no newline translation.

    Attributes:
        root_path (str): The root directory, exactly as given.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.
        encoding (str): The encoding used to decode files.

    Example:
        >>> dumper = ContentDumper("proj")  # doctest: +SKIP
        >>> for block in dumper.stream_contents():  # doctest: +SKIP
        ...     print(block, end="")
        === a.txt ===
        <BLANKLINE>
        hi
        <BLANKLINE>
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the ContentDumper.

        Args:
            root_path: Directory whose files are dumped.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
            encoding: The encoding to use when reading files. Defaults to "utf-8".

        Raises:
            LookupError: If the specified encoding is not available.
        """
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.root_path = os.fspath(root_path)
        self.exclusion_rules = exclusion_rules
        self.encoding = encoding

    def _excluded(self, path: str) -> bool:
        return self.exclusion_rules is not None and self.exclusion_rules.exclude(path)

    def relative_path(self, path: str) -> str:
        """Return ``path`` relative to the root, or the full path if it is not under it.

        Undecodable bytes in the result are replaced so the header can always be written.
        """
        try:
            relative = str(Path(path).relative_to(self.root_path))
        except ValueError:
            relative = path
        return lossy_text(relative)

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all non-excluded regular files under the root.

        Yields:
            Pairs of (path, relative_path) for each file.

        Raises:
            OSError: If a directory cannot be listed.
        """
        if self._excluded(self.root_path):
            return

        root_id = FileIdentifier.from_path(self.root_path)
        stack = [(self.root_path, frozenset([root_id]) if root_id else frozenset())]

        while stack:
            path, ancestors = stack.pop()
            if os.path.isdir(path):
                file_id = FileIdentifier.from_path(path)
                if file_id is not None and path != self.root_path:
                    ancestors = ancestors | {file_id}
                children = list_directory(path, self.exclusion_rules)
                for child in reversed(children):
                    if os.path.islink(child) and os.path.isdir(child) and is_ancestor_loop(child, ancestors):
                        continue
                    stack.append((child, ancestors))
            elif os.path.isfile(path):
                yield path, self.relative_path(path)

    def read_file(self, path: str) -> str:
        """Read a whole file as text.

        Raises:
            ContentDecodingError: If the file is not valid text in the configured encoding.
            OSError: If the file cannot be read.
        """
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ContentDecodingError(lossy_text(path), self.encoding) from e

    def format_file(self, path: str, relative_path: str) -> str:
        """Read a file and wrap its contents in a path header."""
        contents = self.read_file(path)
        return f"=== {relative_path} ===\n\n{contents}\n\n"

    def stream_contents(self) -> Iterator[str]:
        """Yield one formatted block per file, in traversal order."""
        for path, relative_path in self.iterate_files():
            yield self.format_file(path, relative_path)

    def dump(self, sink: TextIO) -> None:
        """Write every formatted block to ``sink``.

        The first undecodable or unreadable file aborts the dump; blocks already
        written are left in place.
        """
        for block in self.stream_contents():
            sink.write(block)
