"""Ordered pattern matching used to decide which paths a walk excludes."""

import logging
import re
from typing import Optional, Sequence, Union

from pathspec import PathSpec

from dirwalker.gitignore_pattern import GitIgnorePattern

logger = logging.getLogger(__name__)

# A compiled regex, a regex source string, or gitignore-style globs
Pattern = Union[re.Pattern[str], str, PathSpec, GitIgnorePattern]


class PatternMatcher:
    """Evaluate a text against an ordered list of patterns.

    Patterns are tried in list order and evaluation stops at the first hit, so when
    several patterns would match, the earliest one is reported. Four kinds of
    pattern are understood:

    - compiled regular expressions, matched with ``search`` (a hit anywhere counts);
    - strings, compiled as regular expressions;
    - ``pathspec.PathSpec`` objects, matched with gitignore semantics;
    - GitIgnorePattern objects, gitignore semantics relative to their root.

    A pattern that cannot be evaluated (for example an invalid regular expression)
    never aborts the evaluation. It is treated as not matching and, when debug is
    enabled, the failure is logged.

    Attributes:
        debug (bool): Whether evaluation failures are logged.

    Example:
        >>> import re
        >>> matcher = PatternMatcher()
        >>> js, ts = re.compile(r"\\.js$"), re.compile(r"\\.ts$")
        >>> matcher.match("test.js", [js, ts])
        True
        >>> matcher.first_match("test.ts", [js, ts]) is ts
        True
        >>> matcher.match("test.txt", [js, ts])
        False
        >>> matcher.match("test.js", None)
        False
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug

    def match(self, text: str, patterns: Optional[Sequence[Pattern]] = None) -> bool:
        """Test whether any of the patterns matches the text.

        Args:
            text: The text to test, typically a full path.
            patterns: Patterns to try in order. None or empty never matches.

        Returns:
            True if at least one pattern matches, False otherwise.
        """
        return self.first_match(text, patterns) is not None

    def first_match(self, text: str, patterns: Optional[Sequence[Pattern]] = None) -> Optional[Pattern]:
        """Return the first pattern, in list order, that matches the text.

        Args:
            text: The text to test, typically a full path.
            patterns: Patterns to try in order. None or empty never matches.

        Returns:
            The matching pattern object as given, or None if nothing matches.
        """
        if not patterns:
            return None

        for pattern in patterns:
            try:
                if self._test(pattern, text):
                    return pattern
            except Exception as e:
                if self.debug:
                    logger.debug("Pattern matching error for %r: %s", pattern, e)
        return None

    @staticmethod
    def _test(pattern: Pattern, text: str) -> bool:
        if isinstance(pattern, (PathSpec, GitIgnorePattern)):
            return pattern.match_file(text)
        if isinstance(pattern, str):
            return re.search(pattern, text) is not None
        if isinstance(pattern, re.Pattern):
            return pattern.search(text) is not None
        raise TypeError(f"Unsupported pattern type: {type(pattern).__name__}")
