## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class OptError(Exception):
    """Base class for all posixopt-raised errors."""
    pass

class OptSpecError(OptError, ValueError):
    """The optstring uses syntax that is not POSIX, or is malformed."""
    def __init__(self, message, *, optstring=None, column=None, token=None):
        super().__init__(message)
        self.optstring = optstring
        self.column = column
        self.token = token
