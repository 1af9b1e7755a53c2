"""Implementation of exclusion rules using .gitignore pattern syntax."""

import os
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dircombine.exceptions import ConfigurationError
from dircombine.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Paths handed to ``exclude()`` are made relative to ``root`` and converted to
    forward-slash form before matching, the way Git sees them. Directories are
    matched with a trailing slash so that patterns such as ``build/`` exclude the
    directory entry itself and not only its contents.

    Attributes:
        root (Optional[Path]): Directory that patterns are anchored to. When None,
            paths are matched as given.
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules("proj/.gitignore", root="proj")  # doctest: +SKIP
        >>> rules.exclude("proj/logs/app.log")  # doctest: +SKIP
        True
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        root: Optional[PathType] = None,
    ) -> None:
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
            root: Directory the patterns are relative to.

        Raises:
            ConfigurationError: If any rules file does not exist.
        """
        self.root = Path(root) if root is not None else None
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def _to_match_path(self, path: PathType) -> Optional[str]:
        path_obj = Path(path)
        if self.root is not None:
            try:
                path_obj = path_obj.relative_to(self.root)
            except ValueError:
                pass
        match_path = path_obj.as_posix()
        if match_path == ".":
            return None
        if self.root is not None and Path(path).is_dir():
            match_path += "/"
        return match_path

    def exclude(self, path: PathType) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        Args:
            path: The path to check.

        Returns:
            bool: True if the last matching pattern excludes the path. The root
                directory itself is never excluded.
        """
        match_path = self._to_match_path(path)
        if match_path is None:
            return False
        return self.spec.match_file(match_path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are appended in the order the files are given, so later files can
        re-include paths with negated patterns.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            ConfigurationError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise ConfigurationError(f"Exclusion file not found: {os.fsdecode(path)}")

            with open(path, "r", encoding="utf-8") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)
