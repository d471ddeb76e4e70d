## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# posixopt — POSIX getopt() as an explicit, instantiable scanner object.
#

from typing import Iterator, Sequence

from .types import DONE, Outcome, Option, UnknownOption, MissingValue, OptionSpec
from .parser import compile_optstring
from .formatting import format_outcome
from .diagnostics import Reporter, StreamReporter, INVALID_OPTION, ARGUMENT_REQUIRED


class Scanner:
    """Classifies one option per call, resuming where the previous call stopped.

    The two cursors `next_index` (which argument) and `char_offset` (which character
    inside a clustered group like `-av`) are the only state carried between calls;
    `char_offset` is 0 exactly when the cursor sits between two arguments.  Scanning
    stops at the first operand, a bare `-`, or after `--`, and the operands are then
    `args[scanner.next_index:]`.

    Errors are never raised, they are returned as `UnknownOption` or `MissingValue`
    and the scanner has already moved past the offending character.
    """

    def __init__(self, start: int = 1, report_errors: bool = True, reporter: Reporter | None = None,
                 verbosity: int = 0, trace_file=None):
        self.reporter = reporter or StreamReporter()
        self.report_errors = report_errors
        self.verbosity = verbosity
        self.trace_file = trace_file
        self.reset(start)

    def reset(self, start: int = 1) -> None:
        """Prepare for a fresh parse; the error-reporting configuration is kept."""
        self.next_index = start
        self.char_offset = 0
        self.last_char: str | None = None
        self.last_error_char: str | None = None
        self.current_value: str | None = None
        self.finished = False

    # Scanning ────────────────────────────────────────────────────────────────────────────────
    def scan_next(self, args: Sequence[str | None], spec: str | OptionSpec) -> Outcome:
        spec = compile_optstring(spec)
        index, offset = self.next_index, self.char_offset
        outcome = self._scan(args, spec)
        if outcome is DONE:
            self.finished = True
        if self.verbosity > 0:
            print(f"\033[90m{index:>3}:{offset:<2}\033[0m  {format_outcome(outcome)}", file=self.trace_file)
        return outcome

    def scan(self, args: Sequence[str | None], spec: str | OptionSpec) -> Iterator[Outcome]:
        """Yield every outcome before end-of-options; the cursor is left on the operands."""
        spec = compile_optstring(spec)
        while (outcome := self.scan_next(args, spec)) is not DONE:
            yield outcome

    def positionals(self, args: Sequence[str | None]) -> list:
        return list(args[self.next_index:])

    def _scan(self, args: Sequence[str | None], spec: OptionSpec) -> Outcome:
        self.current_value = None
        if self.finished: return DONE

        # Starting a new argument, check whether options are over.
        if self.char_offset == 0:
            if self.next_index >= len(args): return DONE
            arg = args[self.next_index]
            if arg is None or not arg.startswith('-') or arg == '-': return DONE
            if arg == '--':
                self.next_index += 1
                return DONE
            self.char_offset = 1

        arg = args[self.next_index]
        char = arg[self.char_offset]
        self.last_char = char

        # A colon is never an option, it only marks values in the optstring.
        if (requires_value := spec.lookup(char)) is None:
            self._report_error(spec, INVALID_OPTION, char)
            self._advance_char(arg)
            return UnknownOption(char)

        if not requires_value:
            self._advance_char(arg)
            return Option(char)

        if self.char_offset + 1 < len(arg):
            self.current_value = arg[self.char_offset + 1:]
        elif self.next_index + 1 < len(args):
            self.next_index += 1
            self.current_value = args[self.next_index]
        else:
            self._report_error(spec, ARGUMENT_REQUIRED, char)
            self._advance_arg()
            return MissingValue(char) if spec.silent else UnknownOption(char)

        self._advance_arg()
        return Option(char, self.current_value)

    def _advance_char(self, arg: str) -> None:
        self.char_offset += 1
        if self.char_offset >= len(arg):
            self._advance_arg()

    def _advance_arg(self) -> None:
        self.next_index += 1
        self.char_offset = 0

    def _report_error(self, spec: OptionSpec, reason: str, char: str) -> None:
        self.last_error_char = char
        # Silent optstrings leave all reporting to the caller.
        if self.report_errors and not spec.silent:
            self.reporter(reason, char)
