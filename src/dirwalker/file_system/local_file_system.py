"""Filesystem operations backed by the local disk."""

import os
import stat
from typing import List

from dirwalker.file_system.base_file_system import BaseFileSystem
from dirwalker.types import FileType


class LocalFileSystem(BaseFileSystem):
    """BaseFileSystem implementation using the ``os`` module.

    Symbolic links are classified with ``os.lstat`` so that a link is reported as
    SYMLINK regardless of what it points to, including dangling links.
    """

    def list_directory(self, path: str) -> List[str]:
        return os.listdir(path)

    def inspect(self, path: str) -> FileType:
        mode = os.lstat(path).st_mode
        if stat.S_ISLNK(mode):
            return FileType.SYMLINK
        if stat.S_ISDIR(mode):
            return FileType.DIRECTORY
        return FileType.FILE

    def resolve(self, base: str, name: str) -> str:
        return os.path.abspath(os.path.join(base, name))

    def relative_to(self, base: str, path: str) -> str:
        return os.path.relpath(path, os.path.abspath(base))
