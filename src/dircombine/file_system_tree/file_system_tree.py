"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which builds a filtered tree of a
directory and renders it as a box-drawing diagram, one line per entry.

Paths are kept as the text they were reached by: the root exactly as given,
joined with the names of its descendants. Exclusion rules see that same text.
"""

import os
from typing import FrozenSet, Iterator, List, NamedTuple, Optional, TextIO

from dircombine.exclusion_rules.base_rules import BaseExclusionRules
from dircombine.file_system_tree.file_identifier import FileIdentifier
from dircombine.file_system_tree.file_system_node import FileSystemNode
from dircombine.types import PathType

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
SPACE = "    "


def list_directory(path: str, exclusion_rules: Optional[BaseExclusionRules] = None) -> List[str]:
    """List the immediate children of a directory that survive the exclusion rules.

    Siblings share their parent's prefix, so sorting the joined paths orders them
    by name and interleaves files and directories alphabetically.

    Raises:
        OSError: If the directory cannot be read.
    """
    with os.scandir(path) as entries:
        children = [os.path.join(path, entry.name) for entry in entries]
    if exclusion_rules is not None:
        children = [child for child in children if not exclusion_rules.exclude(child)]
    return sorted(children)


def is_ancestor_loop(path: str, ancestors: FrozenSet[FileIdentifier]) -> bool:
    """Check whether a symlinked directory points back into its own ancestry."""
    file_id = FileIdentifier.from_path(path)
    return file_id is not None and file_id in ancestors


class RenderState(NamedTuple):
    """One pending line of the tree diagram."""

    node: FileSystemNode
    prefix: str
    is_last: bool


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access and cached. Symbolic links are
    followed. A symlink leading back to a directory that is already an ancestor of
    it is shown as a leaf and not expanded again.

    Attributes:
        root_path (str): The root directory, exactly as given.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.

    Example:
        >>> tree = FileSystemTree("proj")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        └── proj
            ├── a.txt
            └── sub
                └── b.txt
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        self.root_path = os.fspath(root_path)
        self.exclusion_rules = exclusion_rules
        self._tree: Optional[FileSystemNode] = None
        self._built = False

    def _excluded(self, path: str) -> bool:
        return self.exclusion_rules is not None and self.exclusion_rules.exclude(path)

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the filesystem tree.

        Returns:
            The root node, or None if the root itself is excluded.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            OSError: If a directory cannot be listed.
        """
        if not self._built:
            self._build_tree()
        return self._tree

    def _build_tree(self) -> None:
        if not os.path.exists(self.root_path):
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")

        self._tree = None
        self._built = True
        if self._excluded(self.root_path):
            return

        root = FileSystemNode.from_path(
            self.root_path, is_dir=os.path.isdir(self.root_path), is_symlink=os.path.islink(self.root_path)
        )
        root_id = FileIdentifier.from_path(self.root_path)
        stack = [(root, frozenset([root_id]) if root_id else frozenset())]

        while stack:
            node, ancestors = stack.pop()
            if not node.is_dir or node.loop_detected:
                continue

            for child_path in list_directory(node.fs_path, self.exclusion_rules):
                is_dir = os.path.isdir(child_path)
                is_symlink = os.path.islink(child_path)
                loop = is_dir and is_symlink and is_ancestor_loop(child_path, ancestors)
                child = FileSystemNode.from_path(
                    child_path, parent=node, is_dir=is_dir, is_symlink=is_symlink, loop_detected=loop
                )
                if is_dir and not loop:
                    child_id = FileIdentifier.from_path(child_path)
                    stack.append((child, ancestors | {child_id} if child_id else ancestors))

        self._tree = root

    def stream_tree_representation(self, prefix: str = "", is_last: bool = True) -> Iterator[str]:
        """Generate the tree diagram one line at a time.

        Each line is ``{prefix}{branch}{name}`` where the branch is ``└── `` for the
        last sibling and ``├── `` otherwise. A child's prefix extends its parent's
        with four spaces below a last sibling and with ``│   `` below any other.

        Args:
            prefix: Prefix for the root line and all descendants.
            is_last: Whether the root is drawn as a last sibling.

        Yields:
            Lines of the diagram, without trailing newlines.
        """
        root = self.get_tree()
        if root is None:
            return

        stack = [RenderState(root, prefix, is_last)]
        while stack:
            state = stack.pop()
            yield f"{state.prefix}{LAST_BRANCH if state.is_last else BRANCH}{state.node.name}"

            children = state.node.children
            child_prefix = state.prefix + (SPACE if state.is_last else VERTICAL)
            for i in range(len(children) - 1, -1, -1):
                stack.append(RenderState(children[i], child_prefix, i == len(children) - 1))

    def get_tree_representation(self) -> str:
        """Get the complete tree diagram as a single string."""
        return "\n".join(self.stream_tree_representation())


def render_tree(
    path: PathType,
    prefix: str,
    is_last: bool,
    sink: TextIO,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> None:
    """Write the tree diagram rooted at ``path`` to ``sink``, one line per entry.

    Nothing is written if ``path`` itself is excluded. Errors from listing a
    directory or writing to the sink propagate; whatever the sink already received
    is left in place.
    """
    for line in FileSystemTree(path, exclusion_rules).stream_tree_representation(prefix, is_last):
        sink.write(line + "\n")
