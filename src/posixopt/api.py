## posixopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
import types
from typing import Sequence

from .types import DONE, Done, Option, UnknownOption, MissingValue, OptionSpec, Outcome
from .errors import *
from .scanner import Scanner
from .diagnostics import Reporter

_SCANNER = Scanner()

# Classic POSIX names for the default scanner's state.
_POSIX_NAMES = {
    'optind': 'next_index',
    'optarg': 'current_value',
    'optopt': 'last_char',
    'opterr': 'report_errors',
}


def getopt(argv: Sequence[str | None], optstring: str | OptionSpec) -> str | None:
    """Return the next option character, `'?'` or `':'` on errors, or None when done."""
    return _SCANNER.scan_next(argv, optstring).code

def reset(start: int = 1) -> None:
    _SCANNER.reset(start)

def configure(report_errors: bool | None = None, reporter: Reporter | None = None) -> None:
    if report_errors is not None: _SCANNER.report_errors = report_errors
    if reporter is not None: _SCANNER.reporter = reporter


def parse(args: Sequence[str | None], spec: str | OptionSpec, *, start: int = 1,
          report_errors: bool = True, reporter: Reporter | None = None) -> tuple[list[Outcome], list]:
    """Scan a whole argument list with a fresh scanner, returning outcomes and operands."""
    scanner = Scanner(start=start, report_errors=report_errors, reporter=reporter)
    outcomes = list(scanner.scan(args, spec))
    return outcomes, scanner.positionals(args)


def __getattr__(name):
    return getattr(_SCANNER, _POSIX_NAMES.get(name, name))


class _PosixModule(types.ModuleType):
    """Writes to the POSIX names go to the default scanner, like the C globals."""

    def __setattr__(self, name, value):
        if name == 'optind':
            # Assigning the index starts a new parse there, as `optind = 1` does in C.
            _SCANNER.reset(value)
        elif name == 'opterr':
            _SCANNER.report_errors = bool(value)
        elif name in _POSIX_NAMES:
            setattr(_SCANNER, _POSIX_NAMES[name], value)
        else:
            super().__setattr__(name, value)

sys.modules[__name__].__class__ = _PosixModule
