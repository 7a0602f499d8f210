"""Unit tests for the types module."""

from dirwalker.types import ErrorAction, FileType


def test_file_type_values():
    assert FileType.FILE.value == "file"
    assert FileType.DIRECTORY.value == "directory"
    assert FileType.SYMLINK.value == "symlink"


def test_error_action_enum():
    """Test the ErrorAction enum values."""
    assert ErrorAction.IGNORE == "ignore"
    assert ErrorAction.WARN == "warn"
    assert ErrorAction.FAIL == "fail"

    # Test string conversion works both ways
    assert ErrorAction("ignore") == ErrorAction.IGNORE
    assert ErrorAction("warn") == ErrorAction.WARN
    assert ErrorAction("fail") == ErrorAction.FAIL
