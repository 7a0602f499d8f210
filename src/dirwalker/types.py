from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry kinds produced when inspecting a path during traversal.

    Attributes:
        FILE: Anything that is neither a directory nor a symbolic link
        DIRECTORY: Directory
        SYMLINK: Symbolic link (never followed)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class ErrorAction(str, Enum):
    """Action the command-line interface takes for errors reported during a walk.

    Values:
        IGNORE: Drop errors silently
        WARN: Print each error to stderr and continue (default)
        FAIL: Print each error and exit with a non-zero status once the walk completes
    """

    IGNORE = "ignore"
    WARN = "warn"
    FAIL = "fail"
