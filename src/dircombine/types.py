from os import PathLike
from typing import Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Ordered, immutable sequence of substring patterns
IgnoreSet = Tuple[str, ...]
