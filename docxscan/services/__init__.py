"""Document services (loading, extraction, search)."""

from docxscan.services.extraction import (
    DocumentLoader,
    KeywordMatches,
    ParagraphExtractor,
    ParagraphFinder,
    ScanResult,
    ScanService,
    TableExtractor,
    contains_keyword,
)

__all__ = [
    "DocumentLoader",
    "KeywordMatches",
    "ParagraphExtractor",
    "ParagraphFinder",
    "ScanResult",
    "ScanService",
    "TableExtractor",
    "contains_keyword",
]
