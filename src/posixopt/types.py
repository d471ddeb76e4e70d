## posixopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Done:
    """No more options; operands start at the scanner's `next_index`."""

    @property
    def code(self) -> None:
        return None

    def __repr__(self):
        return "Done"


# All checks for end-of-options should be done by comparing to this.
DONE = Done()


@dataclass(frozen=True)
class Option:
    char: str
    value: str | None = None      # Only set for options declared with `:`.

    @property
    def code(self) -> str:
        return self.char


@dataclass(frozen=True)
class UnknownOption:
    char: str

    @property
    def code(self) -> str:
        return '?'


@dataclass(frozen=True)
class MissingValue:
    char: str

    @property
    def code(self) -> str:
        return ':'


Outcome = Done | Option | UnknownOption | MissingValue
ERRORS = (UnknownOption, MissingValue)


@dataclass(frozen=True, eq=False)
class OptionSpec:
    """Compiled optstring: which characters are options and whether they take a value.

    `options` maps each option character to True if a value is required.  When
    `silent` is set (leading `:`), a missing value is reported as `MissingValue`
    and no diagnostics are written.
    """
    source: str
    silent: bool = False
    options: dict[str, bool] = field(default_factory=dict)

    def lookup(self, char: str) -> bool | None:
        """Returns whether `char` requires a value, or None if it's not an option."""
        return self.options.get(char)

    def __contains__(self, char: str) -> bool:
        return char in self.options
