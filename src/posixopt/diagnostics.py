## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# posixopt — Diagnostics written on behalf of the scanner, only when enabled.
#

import sys
from pathlib import PureWindowsPath
from typing import Callable


INVALID_OPTION = "invalid option"
ARGUMENT_REQUIRED = "argument required for option"

# Called as `reporter(reason, char)` for every reported error.
Reporter = Callable[[str, str], None]


def program_name(argv0: str | None = None) -> str:
    """Basename of the running program, accepting both `/` and `\\` separators."""
    path = sys.argv[0] if argv0 is None else argv0
    return PureWindowsPath(path or '').name or "Error"


def format_diagnostic(program: str, reason: str, char: str) -> str:
    return f"{program} : {reason} '-{char}'"


class StreamReporter:
    """Prints one line per error, naming the program and the offending option."""

    def __init__(self, program: str | None = None, file=None):
        self.program = program
        self.file = file

    def __call__(self, reason: str, char: str) -> None:
        program = self.program or program_name()
        print(format_diagnostic(program, reason, char), file=self.file or sys.stderr)
