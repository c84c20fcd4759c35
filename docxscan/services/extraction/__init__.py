"""Document extraction services."""

from docxscan.services.extraction.loader import DocumentLoader, DocumentTree, strip_namespaces
from docxscan.services.extraction.models import KeywordMatches, Row, ScanResult, Table
from docxscan.services.extraction.paragraphs import (
    ParagraphExtractor,
    ParagraphFinder,
    contains_keyword,
)
from docxscan.services.extraction.service import ScanService
from docxscan.services.extraction.tables import TableExtractor, extract_cell_text

__all__ = [
    "DocumentLoader",
    "DocumentTree",
    "KeywordMatches",
    "ParagraphExtractor",
    "ParagraphFinder",
    "Row",
    "ScanResult",
    "ScanService",
    "Table",
    "TableExtractor",
    "contains_keyword",
    "extract_cell_text",
    "strip_namespaces",
]
