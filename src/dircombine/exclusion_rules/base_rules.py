from abc import ABC, abstractmethod

from dircombine.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Both the tree pass and the content pass ask the same rules object whether a
    path is excluded, which keeps the diagram and the dumped contents consistent.
    Paths are passed exactly as they are encountered during traversal: the input
    root as given by the user joined with the names of its descendants.

    Example:
        >>> from dircombine.exclusion_rules.substring_rules import SubstringExclusionRules
        >>> rules = SubstringExclusionRules(["node_modules"])
        >>> rules.exclude("proj/node_modules/left-pad/index.js")
        True
        >>> rules.exclude("proj/src/index.js")
        False
    """

    @abstractmethod
    def exclude(self, path: PathType) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path: The file or directory path to check, as encountered during traversal.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass
