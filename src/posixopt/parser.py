## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import functools

import lark

from .types import OptionSpec
from .errors import OptSpecError


GRAMMAR = r"""start: silent? option*
silent: COLON
option: OPTCHAR required?
required: COLON

// TOKENS
COLON: ":"
OPTCHAR: /[^:\-]/
"""

_PARSER = lark.Lark(GRAMMAR, start='start', parser='lalr', lexer='contextual')


def _is_tree(node, data_: str) -> bool: return isinstance(node, lark.Tree) and node.data == data_


@functools.lru_cache(maxsize=256)
def parse(source: str) -> OptionSpec:
    """Parse a POSIX optstring such as `":hva1f:"` into an `OptionSpec`."""
    # Leading `+` and `-` select GNU scanning modes, never supported here.
    if source[:1] in ('+', '-'):
        raise OptSpecError(f"Leading `{source[0]}` in optstring is not POSIX.",
                           optstring=source, column=1, token=source[0])

    try:
        tree = _PARSER.parse(source)
    except lark.exceptions.UnexpectedInput as exc:
        def attr(k): return getattr(exc, k, None)
        token = attr('char') or getattr(attr('token'), 'value', '')
        if token == '-':
            message = "Option character `-` is not allowed in optstring."
        elif token == ':' and attr('column') == 2 and source.startswith('::'):
            message = "Leading `:` is repeated in optstring; only one selects silent mode."
        elif token == ':':
            message = "Optional arguments `::` are not supported in optstring."
        else:
            message = str(exc)
        raise OptSpecError(message, optstring=source, column=attr('column'), token=token) from None

    options: dict[str, bool] = {}
    for node in tree.children:
        if not _is_tree(node, 'option'): continue
        char, *rest = node.children
        # Duplicates resolve to the first occurrence, same as a left-to-right search.
        options.setdefault(char.value, bool(rest))

    silent = any(_is_tree(node, 'silent') for node in tree.children)
    return OptionSpec(source=source, silent=silent, options=options)


def compile_optstring(spec: str | OptionSpec) -> OptionSpec:
    if isinstance(spec, OptionSpec): return spec
    return parse(spec)


def format_spec_error_context(source: str, column: int | None) -> str:
    result = [f"\033[97m  Optstring \"{source}\"\033[0m"]
    result.append(f"\033[90m    |\033[0m {source}")
    if isinstance(column, int) and column > 0:
        result.append(f"\033[90m    |\033[0m {' ' * (column - 1)}\033[1;33m^\033[0m")
    return '\n' + '\n'.join(result) + '\n'
