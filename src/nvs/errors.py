"""Error types raised while loading navigation data.

Every condition that stops nvs from producing a usable navaid database is a
NavDataError. Lines that are merely filtered out (disabled types, bounds,
markers) are not errors and never raise.
"""


class NavDataError(Exception):
    """Base class for fatal navigation data errors."""


class NavDataConfigError(NavDataError):
    """The location of the navigation data could not be determined."""


class NavDataIOError(NavDataError):
    """The navigation data file could not be opened or read.

    Attributes:
        decompression: True when the failure came from the gzip layer
            (corrupt or truncated archive) rather than the operating system.
    """

    def __init__(self, message: str, decompression: bool = False):
        super().__init__(message)
        self.decompression = decompression


class NavDataFormatError(NavDataError):
    """A line of the navigation data file could not be understood.

    Attributes:
        line_number: 1-based line number in the data file, if known.
    """

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"{self.message} (line {self.line_number})"


class NavDataVersionError(NavDataFormatError):
    """The data file declares a version nvs does not support."""


class NavDataEmptyError(NavDataError):
    """The data file produced no navaids at all."""


class BoundsError(ValueError):
    """A bounds specification is malformed or describes an invalid area."""
