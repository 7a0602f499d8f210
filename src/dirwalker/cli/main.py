"""Command-line interface for dirwalker.

Walks a directory and prints the path of every non-excluded file, relative to the
directory, one per line.

Exit Codes:
    0: Successful completion
    1: Runtime error, or errors were reported with --error-action=fail
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g., when piping to `head`)

Example:
    # List every Python file outside virtual environments
    $ dirwalker -d '/\\.?venv$' -x '^(?!.*\\.py$)' /path/to/project
"""

import asyncio
import logging
import os
import sys
from typing import List, Optional, Sequence

from dirwalker.cli.argparser import apply_ignore_patterns, create_parser
from dirwalker.dir_walker import DirWalker
from dirwalker.settings import WalkSettings
from dirwalker.types import ErrorAction


class PathPrinter:
    """File callback printing each relative path to stdout.

    Once stdout reports a broken pipe, further output is dropped and
    ``pipe_closed`` stays set so the caller can exit accordingly.
    """

    def __init__(self) -> None:
        self.pipe_closed = False

    def __call__(self, relative_path: str, settings: WalkSettings) -> None:
        if self.pipe_closed:
            return
        try:
            print(relative_path, flush=True)
        except BrokenPipeError:
            self.pipe_closed = True
            # Keep the interpreter from reporting the broken pipe again at exit
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dirwalker command-line interface.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.
    """
    settings = WalkSettings()
    parser = create_parser(settings)
    args = parser.parse_args(argv)
    apply_ignore_patterns(settings, args.ignore, args.directory)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    error_action = ErrorAction(args.error_action)
    errors: List[Exception] = []

    def report_error(error: Exception) -> None:
        errors.append(error)
        if error_action != ErrorAction.IGNORE:
            print(f"Warning: {error}", file=sys.stderr)

    printer = PathPrinter()
    walker = DirWalker(debug=args.debug)

    try:
        count = asyncio.run(walker.walk(args.directory, settings, printer, report_error))
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if printer.pipe_closed:
        sys.exit(141)

    if args.count:
        print(f"Files: {count}", file=sys.stderr)

    if error_action == ErrorAction.FAIL and errors:
        print(f"Error: {len(errors)} error(s) encountered during the walk", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
