class XlsWrapperError(Exception):
    """Base class for other exceptions."""


class UnsupportedError(XlsWrapperError):
    """Raised for unsupported operations on documents and records."""


class RecordLimitError(XlsWrapperError):
    """Raised when a document cannot hold any more font or style records."""


class FormatError(XlsWrapperError, ValueError):
    """Raised for malformed custom number formats."""


class FileError(XlsWrapperError):
    """Raised for IO and other OS errors."""


class FileFormatError(XlsWrapperError):
    """Raised for parsing errors during file load."""
