"""Exclusion rules that apply several rule objects at once."""

from typing import List, Sequence

from dircombine.types import PathType

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Excludes a path when any of its constituent rules excludes it.

    ``DirCombiner`` uses this to apply ``--ignore`` substrings and ``--exclude``
    rules files together, so that both passes see one rules object.

    Example:
        >>> from dircombine.exclusion_rules.substring_rules import SubstringExclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [SubstringExclusionRules(["dist"]), SubstringExclusionRules(["tmp"])]
        ... )
        >>> composite.exclude("proj/tmp/x")
        True
        >>> composite.exclude("proj/src/x")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """
        Raises:
            ValueError: If no rules are given.
            TypeError: If an element is not a BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")
        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: PathType) -> bool:
        # Stops at the first rule that excludes
        return any(rule.exclude(path) for rule in self.rules)
