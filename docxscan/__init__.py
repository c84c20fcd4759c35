"""Extract tables and paragraphs from .docx files and search them for keywords."""

from docxscan.exceptions import (
    ArchiveError,
    DocxScanError,
    MalformedXmlError,
    MissingPartError,
    PartTooLargeError,
)
from docxscan.services.extraction import ScanResult, ScanService

__version__ = "0.1.0"

__all__ = [
    "ArchiveError",
    "DocxScanError",
    "MalformedXmlError",
    "MissingPartError",
    "PartTooLargeError",
    "ScanResult",
    "ScanService",
]
