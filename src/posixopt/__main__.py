## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# posixopt — POSIX compliant getopt() option scanning, from Python or the shell.
#

import sys
from typing import NoReturn
from dataclasses import dataclass

import click

from .types import Option, UnknownOption, MissingValue, OptionSpec, ERRORS
from .errors import OptSpecError
from .parser import compile_optstring, format_spec_error_context
from .scanner import Scanner
from .formatting import write_without_ansi, format_getopt_line
from .diagnostics import StreamReporter


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    quiet: bool
    plain: bool
    prog: str | None


DEMO_OPTSTRING = ":hva1f:"
DEMO_USAGE = "Usage : {prog} [-h] [-v] [-a] [-1] [-f <filename>] [non-option-arguments]"
DEMO_HELP = """\
    -h Display this help text
    -v Display the program version number
    -a Set the 'a' flag for the program
    -1 Set the '1' flag for the program
    -f Specify the filename to operate on
non-option-arguments : other arguments not parsed by getopt()"""


class ScanRunner:
    def __init__(self, config: CliConfig):
        self.verbose = config.verbose
        self.quiet = config.quiet
        self.plain = config.plain
        self.prog = config.prog or 'posixopt'

        if self.plain:
            sys.stdout.write = write_without_ansi(sys.stdout.write)
            sys.stderr.write = write_without_ansi(sys.stderr.write)

        self.failure = False

    def _fatal_error(self, message: str, detail: str, context: str = '') -> NoReturn:
        print(f'\033[30;43m {message} \033[0m {detail}\n{context}', file=sys.stderr)
        sys.exit(2)

    def _compile(self, optstring: str) -> OptionSpec:
        try:
            return compile_optstring(optstring)
        except OptSpecError as exc:
            context = format_spec_error_context(optstring, exc.column)
            self._fatal_error("SPEC ERROR.", f"Optstring `\033[97m{optstring}\033[0m` was rejected! {exc}", context)

    def _scanner(self) -> Scanner:
        return Scanner(report_errors=not self.quiet, reporter=StreamReporter(self.prog),
                       verbosity=self.verbose, trace_file=sys.stderr)

    def scan(self, optstring: str, tokens: list[str]) -> None:
        spec = self._compile(optstring)
        args = [self.prog, *tokens]
        scanner = self._scanner()
        outcomes = list(scanner.scan(args, spec))
        self.failure = any(isinstance(o, ERRORS) for o in outcomes)
        print(format_getopt_line(outcomes, scanner.positionals(args)))

    def demo(self, tokens: list[str]) -> None:
        spec = self._compile(DEMO_OPTSTRING)
        args = [self.prog, *tokens]
        scanner = self._scanner()

        for outcome in scanner.scan(args, spec):
            match outcome:
                case UnknownOption(char=char):
                    print(f"Error : unknown option '{char}'", file=sys.stderr)
                    self._usage_error()
                case MissingValue(char=char):
                    print(f"Error : missing argument to option '{char}'", file=sys.stderr)
                    self._usage_error()
                case Option(char='h'):
                    print(DEMO_USAGE.format(prog=self.prog))
                    print(DEMO_HELP)
                case Option(char='v'):
                    print("Version 1.01")
                case Option(char='f', value=value):
                    print(f'You supplied the filename "{value}"')
                case Option(char=char):
                    print(f"You supplied the option flag '{char}'")
        print()

        if operands := scanner.positionals(args):
            print("non-option argv elements :", *operands)

    def _usage_error(self) -> None:
        self.failure = True
        print(DEMO_USAGE.format(prog=self.prog), file=sys.stderr)
        print(f"For help : {self.prog} -h", file=sys.stderr)

    def finalize(self) -> int:
        return 1 if self.failure else 0


@click.group(invoke_without_command=True)
@click.option('--verbose', '-v', default=0, count=True, help='Trace every scanner step on stderr.')
@click.option('--quiet', '-q', is_flag=True, help='Disable the diagnostics written for invalid options.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from all output.')
@click.option('--prog', envvar='POSIXOPT_PROG', default=None, help='Program name used in diagnostics.')
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: bool, plain: bool, prog: str | None) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = CliConfig(verbose=verbose, quiet=quiet, plain=plain, prog=prog)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command('scan')
@click.argument('optstring')
@click.argument('tokens', nargs=-1)
@click.pass_context
def scan(ctx: click.Context, optstring: str, tokens: tuple[str, ...]) -> None:
    """Scan TOKENS with OPTSTRING and print them normalized, like getopt(1)."""
    runner = ScanRunner(ctx.obj['config'])
    runner.scan(optstring, list(tokens))
    ctx.exit(runner.finalize())


@cli.command('demo')
@click.argument('tokens', nargs=-1)
@click.pass_context
def demo(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Example program accepting -h -v -a -1 and -f <filename>."""
    runner = ScanRunner(ctx.obj['config'])
    runner.demo(list(tokens))
    ctx.exit(runner.finalize())


_VALUE_OPTIONS = ('--prog',)


def _command_index(tokens: list[str]) -> int | None:
    """Position of the first token that is neither a global option nor its value."""
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token in _VALUE_OPTIONS:
            index += 2
            continue
        if token.startswith('-'):
            index += 1
            continue
        return index if token in cli.commands else None
    return None


def main(argv: list[str] | None = None) -> None:
    a = list(sys.argv[1:] if argv is None else argv)
    i = _command_index(a)

    # Everything after the command belongs to the scanned program, including `--`.
    if i is not None and a[i+1:] != ['--help']:
        a = [*a[:i+1], '--', *a[i+1:]]

    cli.main(args=a, prog_name='posixopt')


if __name__ == "__main__":
    main()
