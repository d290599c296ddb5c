"""
Error taxonomy. Every error is terminal: library code raises, the CLI
reports the message and exits non-zero.
"""


class PngPackerError(Exception):
    """Base class for all PngPacker errors."""


class PathNotFound(PngPackerError):
    """Input path does not exist."""


class NotADirectory(PngPackerError):
    """A directory was required."""


class NotAFile(PngPackerError):
    """A regular file was required."""


class NoPngFilesInDirectory(PngPackerError):
    """Directory mode found no files with the PNG extension."""


class EmptyInput(PngPackerError):
    """Every entry handed to the encoder was zero-length."""


class NoImagesFound(PngPackerError):
    """The scanned buffer contains no PNG signature."""


class CorruptPackFormat(PngPackerError):
    """Pack signature present but the name framing does not match."""


class InvalidFilename(PngPackerError):
    """Filename cannot be framed by the name delimiter."""


class PackIOError(PngPackerError):
    """Filesystem read/write/mkdir failure."""
