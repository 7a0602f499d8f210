"""Gitignore-style exclusion pattern anchored at a walk root."""

import os
from typing import Sequence

from pathspec import PathSpec

from dirwalker.types import PathType


class GitIgnorePattern:
    """Exclusion pattern using .gitignore syntax, matched relative to a root directory.

    The walker tests patterns against full absolute paths. A plain ``PathSpec`` would
    then anchor patterns such as ``/build`` or ``src/*.py`` at the filesystem root.
    This class converts each path to one relative to ``root`` first, so anchored
    patterns behave as they would in a .gitignore placed in ``root``. Paths outside
    ``root`` never match.

    Attributes:
        root (str): Absolute path the patterns are anchored at.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> pattern = GitIgnorePattern("/project", ["/build", "*.log"])
        >>> pattern.match_file("/project/build")
        True
        >>> pattern.match_file("/project/src/build")
        False
        >>> pattern.match_file("/project/src/app.log")
        True
        >>> pattern.match_file("/elsewhere/app.log")
        False

    Note:
        The path under test carries no trailing separator, so directory-only patterns
        ending in ``/`` do not match the directory itself.
    """

    def __init__(self, root: PathType, lines: Sequence[str]) -> None:
        self.root = os.path.abspath(os.fspath(root))
        self.spec = PathSpec.from_lines("gitwildmatch", lines)

    def match_file(self, path: str) -> bool:
        """Check whether an absolute path is matched by the patterns."""
        relative_path = os.path.relpath(path, self.root)
        if relative_path == os.curdir or relative_path.split(os.sep)[0] == os.pardir:
            return False
        return bool(self.spec.match_file(relative_path.replace(os.sep, "/")))

    def __repr__(self) -> str:
        return f"GitIgnorePattern(root={self.root!r}, patterns={len(self.spec.patterns)})"
