"""Directory combining utilities.

This package walks a directory tree and bundles it into a single text file
containing a tree diagram of the structure followed by the contents of every
file, each headed by its path relative to the root.
"""

from importlib.metadata import PackageNotFoundError, version

from dircombine.dircombine import DirCombiner, combine_directory

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dircombine")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["DirCombiner", "combine_directory", "__version__"]
