"""Exclusion rules based on plain substring containment."""

from typing import Iterable, Optional, Sequence

from dircombine.path_text import lossy_text
from dircombine.types import IgnoreSet, PathType

from .base_rules import BaseExclusionRules


def should_ignore(path: PathType, ignore_set: Optional[Sequence[str]]) -> bool:
    """Check whether any ignore pattern occurs in the textual form of a path.

    Matching is case-sensitive and applies to the whole path, not only its last
    component, so a pattern naming a directory also excludes everything below it.
    An empty pattern is a substring of every path and so ignores everything.

    Args:
        path: The path to check, absolute or relative.
        ignore_set: Substring patterns. ``None`` or empty means nothing is ignored.

    Returns:
        True if at least one pattern is a substring of the path.

    Example:
        >>> should_ignore("proj/sub/b.txt", ("sub",))
        True
        >>> should_ignore("proj/a.txt", ("sub",))
        False
        >>> should_ignore("proj/a.txt", None)
        False
    """
    if not ignore_set:
        return False
    path_str = lossy_text(path)
    return any(pattern in path_str for pattern in ignore_set)


class SubstringExclusionRules(BaseExclusionRules):
    """Exclusion rules that ignore any path containing one of a set of substrings.

    Attributes:
        patterns (IgnoreSet): The configured patterns, in the order they were given.

    Example:
        >>> rules = SubstringExclusionRules(["target", ".git"])
        >>> rules.exclude("repo/.git/HEAD")
        True
        >>> rules.exclude("repo/src/main.rs")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self._patterns: IgnoreSet = tuple(patterns) if patterns is not None else ()

    @property
    def patterns(self) -> IgnoreSet:
        return self._patterns

    def exclude(self, path: PathType) -> bool:
        return should_ignore(path, self._patterns)

    def __repr__(self) -> str:
        return f"SubstringExclusionRules({list(self._patterns)!r})"
