"""Asynchronous recursive directory walker with exclusion patterns.

This module provides the DirWalker class, which enumerates the files beneath a root
directory, prunes directories and skips files whose full path matches exclusion
patterns, and hands every remaining file to a caller-supplied callback together
with its path relative to the root.

Traversal is depth-first and sequential. Blocking filesystem calls run in a worker
thread through ``asyncio.to_thread``, but only one filesystem operation and one
callback are in flight at a time, so callbacks are invoked in listing order.

Symbolic links are always skipped and never followed, which is also what keeps the
walk free of cycles.

Errors never escape ``walk``. Listing, inspection and callback failures are
reported to the error callback (or logged when none is given) and traversal
continues with the next entry.
"""

import asyncio
import inspect
import logging
import os
from typing import Awaitable, Callable, Optional, Union

from dirwalker.file_system.base_file_system import BaseFileSystem
from dirwalker.file_system.local_file_system import LocalFileSystem
from dirwalker.pattern_matcher import PatternMatcher
from dirwalker.settings import WalkSettings
from dirwalker.types import FileType, PathType

logger = logging.getLogger(__name__)

FileCallback = Callable[[str, WalkSettings], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[Exception], None]


class DirWalker:
    """A lightweight asynchronous directory walker with pattern-based exclusion.

    Attributes:
        debug (bool): Emit DEBUG log records for skipped symlinks and found files.
        counter (int): Number of files dispatched by the latest (or running) walk.
        matcher (PatternMatcher): Matcher used to evaluate exclusion patterns.
        file_system (BaseFileSystem): Filesystem operations used for traversal.

    Example:
        >>> import asyncio, re  # doctest: +SKIP
        >>> walker = DirWalker()  # doctest: +SKIP
        >>> settings = WalkSettings(exclude_dirs=[re.compile("node_modules")])  # doctest: +SKIP
        >>> asyncio.run(walker.walk("project", settings, print))  # doctest: +SKIP
        main.js
        1
    """

    def __init__(self, debug: bool = False, file_system: Optional[BaseFileSystem] = None) -> None:
        """Initialize a DirWalker.

        Args:
            debug: Enable debug logging. Defaults to False.
            file_system: Filesystem operations to use. Defaults to LocalFileSystem.
        """
        self.debug = debug
        self.counter = 0
        self.matcher = PatternMatcher(debug)
        self.file_system = file_system if file_system is not None else LocalFileSystem()

    async def walk(
        self,
        root_path: PathType,
        settings: Optional[WalkSettings] = None,
        file_callback: Optional[FileCallback] = None,
        err_callback: Optional[ErrorCallback] = None,
    ) -> int:
        """Recursively walk a directory and dispatch every non-excluded file.

        Args:
            root_path: Directory to start from. Relative paths handed to the callback
                are always relative to this directory, at any depth.
            settings: Exclusion configuration. Defaults to no exclusions. The walker
                works on a shallow copy and never mutates the caller's object.
            file_callback: Called as ``file_callback(relative_path, settings)`` once per
                matched file, in listing order. May return an awaitable, which is
                awaited before traversal continues.
            err_callback: Called with each error encountered. When omitted, errors are
                logged at ERROR level instead.

        Returns:
            The number of files for which the callback was dispatched. A callback that
            fails still counts.
        """
        self.counter = 0
        _settings = settings.copy() if settings is not None else WalkSettings()
        try:
            base_path = self.file_system.resolve(os.fspath(root_path), "")
        except Exception as e:
            self._handle_error(f"Error reading directory: {os.fspath(root_path)}", e, err_callback)
            return self.counter

        await self._walk(base_path, base_path, _settings, file_callback, err_callback)

        return self.counter

    async def _walk(
        self,
        target_path: str,
        base_path: str,
        settings: WalkSettings,
        file_callback: Optional[FileCallback],
        err_callback: Optional[ErrorCallback],
    ) -> None:
        """Recursive helper for walk."""
        try:
            names = await asyncio.to_thread(self.file_system.list_directory, target_path)
        except Exception as e:
            self._handle_error(f"Error reading directory: {target_path}", e, err_callback)
            return

        for name in names:
            file_path = os.path.join(target_path, name)

            try:
                file_path = self.file_system.resolve(target_path, name)
                file_type = await asyncio.to_thread(self.file_system.inspect, file_path)
            except Exception as e:
                self._handle_error(f"Error inspecting entry: {file_path}", e, err_callback)
                continue

            if file_type is FileType.SYMLINK:
                if self.debug:
                    logger.debug("Skipping symbolic link: %s", file_path)
                continue

            if file_type is FileType.DIRECTORY:
                if self.matcher.match(file_path, settings.exclude_dirs):
                    continue
                await self._walk(file_path, base_path, settings, file_callback, err_callback)
                continue

            if self.matcher.match(file_path, settings.exclude_ext):
                continue

            self.counter += 1
            if self.debug:
                logger.debug("Found file: %s", file_path)

            try:
                relative_path = self.file_system.relative_to(base_path, file_path)
                if file_callback is not None:
                    result = file_callback(relative_path, settings)
                    if inspect.isawaitable(result):
                        await result
            except Exception as e:
                self._handle_error(f"Error processing file: {file_path}", e, err_callback)

    def _handle_error(self, message: str, error: Exception, err_callback: Optional[ErrorCallback]) -> None:
        """Route an error to the error callback, or log it when there is none."""
        if err_callback is None:
            logger.error("%s: %s", message, error)
            return
        try:
            err_callback(error)
        except Exception as e:
            logger.error("Error callback failed while handling %r: %s", error, e)
