"""Unit tests for the PatternMatcher class."""

import logging
import os
import re
from unittest.mock import Mock

import pytest
from pathspec import PathSpec

from dirwalker.gitignore_pattern import GitIgnorePattern
from dirwalker.pattern_matcher import PatternMatcher


@pytest.fixture
def matcher():
    return PatternMatcher()


class TestConstructor:
    def test_default_debug_is_false(self):
        assert PatternMatcher().debug is False

    def test_debug_enabled(self):
        assert PatternMatcher(True).debug is True


class TestMatch:
    def test_returns_true_when_text_matches(self, matcher):
        patterns = [re.compile(r"\.js$"), re.compile(r"\.ts$")]
        assert matcher.match("test.js", patterns) is True
        assert matcher.match("test.ts", patterns) is True

    def test_returns_false_when_nothing_matches(self, matcher):
        patterns = [re.compile(r"\.js$"), re.compile(r"\.ts$")]
        assert matcher.match("test.txt", patterns) is False
        assert matcher.match("readme.md", patterns) is False

    def test_none_patterns(self, matcher):
        assert matcher.match("test.js", None) is False
        assert matcher.match("test.js") is False

    def test_empty_patterns(self, matcher):
        assert matcher.match("test.js", []) is False

    def test_search_semantics_on_full_paths(self, matcher):
        patterns = [re.compile("node_modules"), re.compile(r"\.git"), re.compile("dist")]
        assert matcher.match("/path/to/node_modules/lib", patterns)
        assert matcher.match("/path/to/.git/config", patterns)
        assert matcher.match("/path/to/dist/output.js", patterns)
        assert not matcher.match("/path/to/src/main.py", patterns)

    def test_string_patterns_are_regular_expressions(self, matcher):
        assert matcher.match("/logs/app.log", [r"\.log$"])
        assert not matcher.match("/logs/app.log.gz", [r"\.log$"])

    def test_pathspec_patterns(self, matcher):
        spec = PathSpec.from_lines("gitwildmatch", ["*.pyc", "__pycache__"])
        assert matcher.match("/project/pkg/module.pyc", [spec])
        assert matcher.match("/project/pkg/__pycache__", [spec])
        assert not matcher.match("/project/pkg/module.py", [spec])

    def test_gitignore_patterns_are_anchored_at_their_root(self, matcher):
        pattern = GitIgnorePattern("/project", ["/build"])
        assert matcher.match(os.path.abspath("/project/build"), [pattern])
        assert not matcher.match(os.path.abspath("/project/src/build"), [pattern])


class TestFirstMatch:
    def test_returns_matching_pattern(self, matcher):
        js, ts = re.compile(r"\.js$"), re.compile(r"\.ts$")
        assert matcher.first_match("test.js", [js, ts]) is js
        assert matcher.first_match("test.ts", [js, ts]) is ts

    def test_returns_none_when_nothing_matches(self, matcher):
        assert matcher.first_match("test.txt", [re.compile(r"\.js$")]) is None

    def test_returns_none_for_missing_patterns(self, matcher):
        assert matcher.first_match("test.js", None) is None
        assert matcher.first_match("test.js", []) is None

    def test_earliest_declared_pattern_wins(self, matcher):
        pattern1 = re.compile(r"test")
        pattern2 = re.compile(r"\.js$")
        assert matcher.first_match("test.js", [pattern1, pattern2]) is pattern1
        assert matcher.first_match("test.js", [pattern2, pattern1]) is pattern2

    def test_stops_at_first_hit(self, matcher):
        first = re.compile("a")
        spy = Mock(spec=re.Pattern)
        assert matcher.first_match("abc", [first, spy]) is first
        spy.search.assert_not_called()


class TestMalformedPatterns:
    def test_invalid_regex_does_not_abort_evaluation(self, matcher):
        valid = re.compile(r"\.js$")
        assert matcher.first_match("test.js", ["([unclosed", valid]) is valid

    def test_unsupported_pattern_type_is_skipped(self, matcher):
        valid = re.compile("x")
        assert matcher.first_match("x", [42, None, valid]) is valid

    def test_only_malformed_patterns_never_match(self, matcher):
        assert matcher.match("anything", ["(", "[", "*bad"]) is False

    def test_failures_logged_in_debug_mode(self, caplog):
        matcher = PatternMatcher(debug=True)
        with caplog.at_level(logging.DEBUG, logger="dirwalker.pattern_matcher"):
            assert matcher.first_match("test.js", ["([unclosed"]) is None
        assert "Pattern matching error" in caplog.text

    def test_failures_silent_without_debug(self, matcher, caplog):
        with caplog.at_level(logging.DEBUG, logger="dirwalker.pattern_matcher"):
            assert matcher.first_match("test.js", ["([unclosed"]) is None
        assert [r for r in caplog.records if r.name.startswith("dirwalker")] == []
