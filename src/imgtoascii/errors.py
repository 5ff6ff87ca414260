class ImgToAsciiError(Exception):
    """Base class for conversion failures."""


class ConfigurationError(ImgToAsciiError, ValueError):
    """The density ramp is unusable (empty)."""


class DecodeError(ImgToAsciiError):
    """The source image could not be read or decoded."""


class WriteError(ImgToAsciiError, OSError):
    """The output could not be written.

    The rendered grid is kept in ``lines`` so the caller can send it elsewhere.
    """

    def __init__(self, message: str, lines: list[str] | None = None):
        super().__init__(message)
        self.lines = list(lines) if lines is not None else []
