## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import shlex

from .types import Outcome, Done, Option, UnknownOption, MissingValue


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_outcome(outcome: Outcome) -> str:
    match outcome:
        case Done():
            return 'done'
        case Option(char=char, value=None):
            return f'-{char}'
        case Option(char=char, value=value):
            return f'-{char} {shlex.quote(value)}'
        case UnknownOption(char=char):
            return f'\033[33m? -{char}\033[0m'
        case MissingValue(char=char):
            return f'\033[33m: -{char}\033[0m'
    raise TypeError(f"Not a scan outcome: {outcome!r}")

def format_getopt_line(outcomes: list[Outcome], operands: list[str]) -> str:
    """Render options then operands after `--`, suitable for `eval set -- ...` in a shell."""
    words = []
    for outcome in outcomes:
        if not isinstance(outcome, Option): continue
        words.append(shlex.quote(f'-{outcome.char}'))
        if outcome.value is not None:
            words.append(shlex.quote(outcome.value))
    words.append('--')
    words.extend(shlex.quote(op) for op in operands)
    return ' '.join(words)
