"""Exclusion settings consumed by DirWalker."""

from typing import Any, List, Optional, Sequence

from dirwalker.pattern_matcher import Pattern


class WalkSettings:
    """Exclusion configuration for a single directory walk.

    Holds two independent, ordered pattern lists. Both are tested against the full
    resolved path of an entry, so a pattern such as ``node_modules`` matches at any
    depth.

    Attributes:
        exclude_dirs (List[Pattern]): Directories whose path matches any of these
            patterns are pruned, including all of their descendants.
        exclude_ext (List[Pattern]): Files whose path matches any of these patterns
            are skipped and not counted.

    Example:
        >>> import re
        >>> settings = WalkSettings(exclude_dirs=[re.compile("node_modules")])
        >>> clone = settings.copy()
        >>> clone == settings, clone is settings
        (True, False)
        >>> clone.exclude_ext.append(r"\\.log$")
        >>> settings.exclude_ext
        []
    """

    def __init__(
        self,
        exclude_dirs: Optional[Sequence[Pattern]] = None,
        exclude_ext: Optional[Sequence[Pattern]] = None,
    ) -> None:
        self.exclude_dirs: List[Pattern] = list(exclude_dirs or [])
        self.exclude_ext: List[Pattern] = list(exclude_ext or [])

    def copy(self) -> "WalkSettings":
        """Return a shallow copy with new lists holding the same pattern objects."""
        return WalkSettings(self.exclude_dirs, self.exclude_ext)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, WalkSettings):
            return NotImplemented
        return self.exclude_dirs == other.exclude_dirs and self.exclude_ext == other.exclude_ext

    def __repr__(self) -> str:
        return f"WalkSettings(exclude_dirs={self.exclude_dirs!r}, exclude_ext={self.exclude_ext!r})"
