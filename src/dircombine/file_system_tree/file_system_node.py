"""Node representation for file system elements in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node

from dircombine.path_text import lossy_text


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with the filesystem path it was created from and a cached
    classification, so the renderer never has to touch the filesystem again.
    The filesystem path lives in ``fs_path`` because anytree already uses ``path``
    for the tuple of nodes from the root.

    Attributes:
        name (str): Display name: the final path component, or the full path text
            when the path has none (for example ``/`` or ``.``).
        fs_path (str): The path as encountered during traversal.
        is_dir (bool): True if the path is a directory, following symlinks.
        is_symlink (bool): True if the path itself is a symbolic link.
        loop_detected (bool): True if this is a symlink back to one of its own
            ancestors; such nodes are never expanded.

    Example:
        >>> root = FileSystemNode.from_path("proj", is_dir=True)
        >>> child = FileSystemNode.from_path("proj/a.txt", parent=root)
        >>> child.name
        'a.txt'
        >>> child.parent is root
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        fs_path: Optional[str] = None,
        is_dir: bool = False,
        is_symlink: bool = False,
        loop_detected: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.fs_path = fs_path if fs_path is not None else name
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.loop_detected = loop_detected

    @staticmethod
    def display_name(fs_path: str) -> str:
        """Return the final component of ``fs_path``, or its full text if there is none.

        Undecodable bytes in the name are replaced so the result can always be written.
        """
        return lossy_text(Path(fs_path).name or fs_path)

    @classmethod
    def from_path(cls, fs_path: str, parent: Optional["FileSystemNode"] = None, **kwargs: Any) -> "FileSystemNode":
        return cls(cls.display_name(fs_path), parent=parent, fs_path=fs_path, **kwargs)
