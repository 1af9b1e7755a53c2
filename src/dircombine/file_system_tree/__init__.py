"""File system tree representation with configurable exclusion rules.

This module provides classes for building tree representations of directory
structures and rendering them as box-drawing diagrams, with support for
excluding files and directories based on specified rules.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree, list_directory, render_tree

__all__ = ["FileSystemNode", "FileSystemTree", "list_directory", "render_tree"]
