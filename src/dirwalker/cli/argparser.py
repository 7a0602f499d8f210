"""Command-line argument parsing for dirwalker.

This module defines the command-line interface for dirwalker,
handling argument parsing and validation.
"""

import argparse
import re
from typing import Any, List, Optional, Sequence, Type, Union

from dirwalker import __version__
from dirwalker.gitignore_pattern import GitIgnorePattern
from dirwalker.settings import WalkSettings
from dirwalker.types import ErrorAction


def regex_pattern(value: str) -> "re.Pattern[str]":
    """Compile a command-line value as a regular expression.

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid regular expression.
    """
    try:
        return re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression {value!r}: {e}")


def create_exclusion_action(settings: WalkSettings) -> Type[argparse.Action]:
    """Create a custom action class for filling in exclusion settings.

    This factory function creates an action class that appends patterns to the
    provided settings object as arguments are processed. This preserves the exact
    order of exclusion patterns as they appear on the command line, which decides
    which pattern is reported first.

    Args:
        settings: The settings object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionPatternAction(argparse.Action):
        """Action to append exclusion patterns as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-d", "--exclude-dir"):
                settings.exclude_dirs.append(values)  # type: ignore[arg-type]
            else:  # -x/--exclude-file
                settings.exclude_ext.append(values)  # type: ignore[arg-type]

            # Also keep the raw values on the namespace
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionPatternAction


def create_parser(settings: WalkSettings) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        settings: The settings object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirwalker's options.
    """
    description = """
    dirwalker: List the files beneath a directory, skipping excluded paths.

    The directory is walked depth-first. Symbolic links are never followed. Each
    matched file is printed on its own line, relative to DIRECTORY.

    Exclusion patterns are tested against the full absolute path of each entry,
    so a pattern like "node_modules" matches at any depth.
    """

    epilog = """
    Examples:
      # List every file
      dirwalker /path/to/project

      # Prune node_modules and .git directories, skip log files
      dirwalker -d node_modules -d '/\\.git$' -x '\\.log$' /path/to/project

      # Exclude with gitignore-style globs (applied to directories and files)
      dirwalker -i "*.pyc" -i "__pycache__" /path/to/project

      # Fail if any directory could not be read, and print the file count
      dirwalker -E fail -c /path/to/project
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    exclusion_action = create_exclusion_action(settings)

    parser.add_argument("directory", help="The directory to walk.")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument(
        "-d",
        "--exclude-dir",
        action=exclusion_action,
        dest="exclude_dir",
        type=regex_pattern,
        metavar="REGEX",
        help="Prune directories whose full path matches REGEX. Can be specified multiple times.",
    )
    parser.add_argument(
        "-x",
        "--exclude-file",
        action=exclusion_action,
        dest="exclude_file",
        type=regex_pattern,
        metavar="REGEX",
        help="Skip files whose full path matches REGEX. Can be specified multiple times.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        metavar="GLOB",
        help=(
            "Gitignore-style pattern, relative to DIRECTORY, excluding matching directories and files. "
            "Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-E",
        "--error-action",
        choices=[action.value for action in ErrorAction],
        default=ErrorAction.WARN.value,
        help="How to handle errors encountered during the walk (default: warn).",
    )
    parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        help="Print the number of files found to stderr.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log skipped symbolic links and found files to stderr.",
    )

    return parser


def apply_ignore_patterns(settings: WalkSettings, ignore: Optional[Sequence[str]], root: str) -> None:
    """Add the -i/--ignore globs to both exclusion lists as a single GitIgnorePattern.

    The globs are anchored at the walked directory, as in a .gitignore placed there.

    Args:
        settings: The settings object to update.
        ignore: Gitignore-style patterns from the command line, if any.
        root: The directory being walked.
    """
    if not ignore:
        return
    pattern = GitIgnorePattern(root, ignore)
    settings.exclude_dirs.append(pattern)
    settings.exclude_ext.append(pattern)
