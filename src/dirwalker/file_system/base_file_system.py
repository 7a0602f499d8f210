from abc import ABC, abstractmethod
from typing import List

from dirwalker.types import FileType


class BaseFileSystem(ABC):
    """
    Abstract base class defining the filesystem operations a DirWalker depends on.

    The walker never touches the filesystem directly. It lists, inspects and resolves
    paths through this interface, so any conforming implementation (the local disk,
    an in-memory tree, a mock) can be substituted. Methods are synchronous; the
    walker runs them off the event loop.

    Implementations report failures by raising OSError subclasses such as
    FileNotFoundError, PermissionError or NotADirectoryError. The walker catches and
    routes them to its error handling.

    Example:
        >>> from dirwalker.file_system.local_file_system import LocalFileSystem
        >>> fs = LocalFileSystem()
        >>> fs.relative_to("/project", "/project/src/main.py").replace("\\\\", "/")
        'src/main.py'
    """

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """
        List the entry names of a directory in the order the filesystem returns them.

        Args:
            path (str): Directory to list.

        Returns:
            List[str]: Entry names (not paths). The order is implementation-defined.

        Raises:
            OSError: If the directory cannot be listed.
        """
        pass

    @abstractmethod
    def inspect(self, path: str) -> FileType:
        """
        Classify a path without following symbolic links.

        Args:
            path (str): Absolute path of the entry.

        Returns:
            FileType: SYMLINK for symbolic links, DIRECTORY for directories and FILE
            for everything else.

        Raises:
            OSError: If the entry cannot be inspected.
        """
        pass

    @abstractmethod
    def resolve(self, base: str, name: str) -> str:
        """Resolve an entry name against its directory into an absolute, normalized path.

        An empty name resolves the directory itself.
        """
        pass

    @abstractmethod
    def relative_to(self, base: str, path: str) -> str:
        """Express ``path`` relative to ``base`` using the platform separator."""
        pass
