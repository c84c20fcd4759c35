"""Single-pass scan of a .docx file."""

import logging
import os
from collections.abc import Iterable

from docxscan.services.extraction.loader import DocumentLoader, DocumentTree
from docxscan.services.extraction.models import KeywordMatches, ScanResult, Table
from docxscan.services.extraction.paragraphs import ParagraphExtractor, ParagraphFinder
from docxscan.services.extraction.tables import TableExtractor

logger = logging.getLogger(__name__)


class ScanService:
    """Load a document once and run every extractor over it."""

    def __init__(self, loader: DocumentLoader | None = None):
        self.loader = loader or DocumentLoader()
        self.table_extractor = TableExtractor()
        self.paragraph_extractor = ParagraphExtractor()

    def load(self, path: str | os.PathLike) -> DocumentTree:
        """Load and parse the document part of a .docx file."""
        return self.loader.load(path)

    def extract_tables(self, path: str | os.PathLike) -> list[Table]:
        """Extract all tables from a .docx file."""
        return self.table_extractor.extract(self.load(path))

    def extract_paragraphs(self, path: str | os.PathLike) -> list[str]:
        """Extract all non-empty paragraphs from a .docx file."""
        return self.paragraph_extractor.extract(self.load(path))

    def search(self, path: str | os.PathLike, keywords: Iterable[str]) -> list[KeywordMatches]:
        """Find the paragraphs of a .docx file matching each keyword."""
        finder = ParagraphFinder(self.extract_paragraphs(path))
        return finder.find_paragraphs_with_keywords(keywords)

    def scan(self, path: str | os.PathLike, keywords: Iterable[str] = ()) -> ScanResult:
        """
        Extract tables, paragraphs and keyword matches in one pass.

        Args:
            path: Path to the .docx file
            keywords: Keywords to search paragraphs for

        Returns:
            ScanResult for the file
        """
        keywords = list(keywords)
        tree = self.load(path)

        paragraphs = self.paragraph_extractor.extract(tree)
        finder = ParagraphFinder(paragraphs)

        result = ScanResult(
            path=os.fspath(path),
            tables=self.table_extractor.extract(tree),
            paragraphs=paragraphs,
            matches=finder.find_paragraphs_with_keywords(keywords),
            missing=finder.find_missing_keywords(keywords),
        )

        logger.info(
            f"Scanned {result.path}: {len(result.tables)} tables, "
            f"{len(result.paragraphs)} paragraphs, "
            f"{len(result.matches)}/{len(keywords)} keywords matched"
        )
        return result
