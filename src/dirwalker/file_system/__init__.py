"""Filesystem capability used by the directory walker."""

from .base_file_system import BaseFileSystem
from .local_file_system import LocalFileSystem

__all__ = [
    "BaseFileSystem",
    "LocalFileSystem",
]
