from __future__ import annotations


class PBKDFError(Exception):
    """Base class for every error raised by this package."""


class InvalidParameterError(PBKDFError, ValueError):
    pass


class InvalidKeyLengthError(InvalidParameterError):
    pass


class InvalidIterationCountError(InvalidParameterError):
    pass


class KeyTooLongError(PBKDFError, ValueError):
    """The requested key is longer than the engine can produce for this hash."""


class RecordFormatError(PBKDFError, ValueError):
    """A stored credential string could not be parsed."""


class RandomSourceError(PBKDFError):
    pass


class UnsupportedHashError(PBKDFError, ValueError):
    pass
