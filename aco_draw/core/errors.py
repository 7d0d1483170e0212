"""Exceptions raised while decoding .aco files.

Everything derives from AcoError so the CLI can report any decode failure
with a single except clause. Format errors are also ValueErrors.
"""


class AcoError(Exception):
    """Base class for aco-draw errors."""


class AcoFormatError(AcoError, ValueError):
    """The file is not a well-formed .aco colour list."""


class TruncatedFileError(AcoFormatError):
    """The stream ended before a field could be read in full."""

    def __init__(self, what: str, expected: int, got: int):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(f'Truncated file: needed {expected} bytes for {what}, got {got}')


class UnsupportedColourSpaceError(AcoFormatError):
    """A record names a colour space id with no registered decoder."""

    def __init__(self, space_id: int):
        self.space_id = space_id
        super().__init__(f'The colour space (ID: {space_id}) is not supported.')


class ColourSpaceInvariantError(AcoError, RuntimeError):
    """A decoder reached a state its arithmetic rules out. Always a bug."""
