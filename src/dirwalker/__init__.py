"""Lightweight asynchronous directory walking utilities.

This package recursively enumerates the files beneath a directory, skips
directories and files matching exclusion patterns, never follows symbolic links,
and hands each remaining file to a caller-supplied callback.
"""

from importlib.metadata import PackageNotFoundError, version

from dirwalker.dir_walker import DirWalker, ErrorCallback, FileCallback
from dirwalker.pattern_matcher import Pattern, PatternMatcher
from dirwalker.settings import WalkSettings

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirwalker")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DirWalker",
    "ErrorCallback",
    "FileCallback",
    "Pattern",
    "PatternMatcher",
    "WalkSettings",
]
