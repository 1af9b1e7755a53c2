"""Directory combining.

This module ties the tree diagram and the content dump together into the single
combined output: a "Directory Structure" section followed by a "File Contents"
section, both filtered by the same exclusion rules.
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from dircombine.content_dumper import ContentDumper
from dircombine.exceptions import ConfigurationError
from dircombine.exclusion_rules.base_rules import BaseExclusionRules
from dircombine.exclusion_rules.composite_rules import CompositeExclusionRules
from dircombine.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dircombine.exclusion_rules.substring_rules import SubstringExclusionRules
from dircombine.file_system_tree.file_system_tree import FileSystemTree
from dircombine.io.output_sink import OutputSink
from dircombine.types import PathType

TREE_HEADER = "Directory Structure:\n\n"
CONTENTS_HEADER = "\nFile Contents:\n\n"


class DirCombiner:
    """Combines a directory's structure and file contents into one text document.

    The tree diagram is produced first, then the contents of every file. The two
    sections come from two separate traversals that share one exclusion rules
    object, so an entry is either present in both sections or absent from both.

    Attributes:
        directory (str): Root directory being combined, exactly as given.
        exclusion_rules (BaseExclusionRules): Rules shared by both passes.

    Example:
        >>> combiner = DirCombiner("proj", ignore_patterns=["sub"])  # doctest: +SKIP
        >>> print("".join(combiner.stream()))  # doctest: +SKIP
        Directory Structure:
        <BLANKLINE>
        └── proj
            └── a.txt
        <BLANKLINE>
        File Contents:
        <BLANKLINE>
        === a.txt ===
        <BLANKLINE>
        hi
        <BLANKLINE>

    Raises:
        ConfigurationError: If the directory does not exist or is not a directory,
            or if an exclusion file cannot be found.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        ignore_patterns: Optional[Iterable[str]] = None,
        exclude_files: Optional[Sequence[PathType]] = None,
        encoding: str = "utf-8",
    ) -> None:
        """Validate the input directory and build the shared exclusion rules.

        Args:
            directory: Directory to combine.
            ignore_patterns: Substrings; any path containing one is excluded.
            exclude_files: Gitignore-style rules files, matched relative to ``directory``.
            encoding: Encoding used to read files. Defaults to "utf-8".
        """
        self.directory = os.fspath(directory)
        if not os.path.exists(self.directory):
            raise ConfigurationError(f"Input directory does not exist: {self.directory}")
        if not os.path.isdir(self.directory):
            raise ConfigurationError(f"Input path is not a directory: {self.directory}")

        rules: List[BaseExclusionRules] = [SubstringExclusionRules(ignore_patterns)]
        if exclude_files:
            rules.append(GitIgnoreExclusionRules(exclude_files, root=self.directory))
        self.exclusion_rules: BaseExclusionRules = rules[0] if len(rules) == 1 else CompositeExclusionRules(rules)

        self._tree = FileSystemTree(self.directory, self.exclusion_rules)
        self._dumper = ContentDumper(self.directory, self.exclusion_rules, encoding=encoding)

    def stream_tree(self) -> Iterator[str]:
        """Yield the "Directory Structure" section, header first, one line at a time."""
        yield TREE_HEADER
        for line in self._tree.stream_tree_representation():
            yield line + "\n"

    def stream_contents(self) -> Iterator[str]:
        """Yield the "File Contents" section, header first, one file block at a time."""
        yield CONTENTS_HEADER
        yield from self._dumper.stream_contents()

    def stream(self) -> Iterator[str]:
        """Yield the complete combined document in output order."""
        yield from self.stream_tree()
        yield from self.stream_contents()

    def write(self, output_path: PathType) -> Path:
        """Write the combined document to ``output_path``.

        The file is truncated first and parent directories are created as needed.
        A failure part way through leaves the partial output in place.

        Returns:
            The output path.
        """
        with OutputSink(output_path) as sink:
            for chunk in self.stream():
                sink.write(chunk)
        return sink.path


def combine_directory(
    input_dir: PathType,
    output_path: PathType,
    ignore: Optional[Iterable[str]] = None,
    exclude_files: Optional[Sequence[PathType]] = None,
    encoding: str = "utf-8",
) -> Path:
    """Combine ``input_dir`` into the single text file ``output_path``.

    Example:
        >>> combine_directory("proj", "out/proj.txt", ignore=["node_modules", ".git"])  # doctest: +SKIP
        PosixPath('out/proj.txt')
    """
    combiner = DirCombiner(input_dir, ignore_patterns=ignore, exclude_files=exclude_files, encoding=encoding)
    return combiner.write(output_path)
