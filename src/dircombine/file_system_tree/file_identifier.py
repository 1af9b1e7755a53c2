"""File identifier for uniquely identifying directories by device and inode."""

import os
from typing import NamedTuple, Optional

from dircombine.types import PathType


class FileIdentifier(NamedTuple):
    """Device and inode pair that uniquely identifies a file or directory.

    Used to notice when a followed symlink leads back into one of its own
    ancestors, which would otherwise make traversal run forever.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Stat ``path`` (following symlinks) and build its identifier.

        Returns:
            The identifier, or None if the path cannot be stat'ed (for example a
            dangling symlink) or the platform reports no inode number.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        if stat_info.st_ino == 0:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
