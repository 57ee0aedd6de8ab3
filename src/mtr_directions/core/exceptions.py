"""Custom exceptions for MTR direction data."""


class MtrDataError(Exception):
    """Base exception for MTR direction data errors."""

    pass


class PatchTableError(MtrDataError):
    """Raised when a curated patch table is malformed or has dead entries."""

    pass


class LineNotFoundError(MtrDataError):
    """Raised when a line code is not present in the generated data."""

    pass


class DirectionNotFoundError(MtrDataError):
    """Raised when a line has no entry for the requested direction."""

    pass


class StationNotFoundError(MtrDataError):
    """Raised when a station code cannot be found on a line."""

    pass
