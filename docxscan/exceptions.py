"""Exception taxonomy for document loading errors.

All failures are terminal for a single invocation; nothing here is retried.
Structural absence (no tables, no paragraphs, no matches) is not an error.
"""

import os


class DocxScanError(Exception):
    """Base class for document loading errors."""

    def __init__(self, message: str, path: str | os.PathLike | None = None):
        super().__init__(message)
        self.path = os.fspath(path) if path is not None else None


class ArchiveError(DocxScanError):
    """The input is missing, unreadable, or not a valid zip container.

    Also raised for a corrupt entry inside an otherwise readable archive.
    """

    pass


class PartTooLargeError(ArchiveError):
    """The document part exceeds the configured read-size limit."""

    def __init__(self, message: str, path=None, size: int = 0, limit: int = 0):
        super().__init__(message, path)
        self.size = size
        self.limit = limit


class MissingPartError(DocxScanError):
    """The archive has no document part (normally word/document.xml)."""

    def __init__(self, message: str, path=None, part: str | None = None):
        super().__init__(message, path)
        self.part = part


class MalformedXmlError(DocxScanError):
    """The document part exists but is not well-formed XML."""

    def __init__(self, message: str, path=None, part: str | None = None):
        super().__init__(message, path)
        self.part = part
