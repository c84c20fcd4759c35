"""Paragraph extraction and keyword search."""

import logging
import re
from collections.abc import Iterable

from docxscan.enums import WordElement
from docxscan.services.extraction.loader import DocumentTree
from docxscan.services.extraction.models import KeywordMatches

logger = logging.getLogger(__name__)


def contains_keyword(text: str, keyword: str) -> bool:
    """Check whether text contains keyword, ignoring case.

    The keyword is matched literally; regex metacharacters have no special
    meaning.
    """
    return re.search(re.escape(keyword), text, re.IGNORECASE) is not None


class ParagraphExtractor:
    """Extract the text of every non-empty paragraph."""

    def extract(self, tree: DocumentTree) -> list[str]:
        """
        Extract paragraph text in document order.

        Text runs inside a paragraph are joined with a single space and
        the result is trimmed. Paragraphs that end up empty are skipped.

        Args:
            tree: Namespace-stripped document root

        Returns:
            Non-empty paragraph strings
        """
        paragraphs: list[str] = []

        for paragraph_node in tree.iterfind(WordElement.PARAGRAPH.xpath):
            text = self._paragraph_text(paragraph_node).strip()
            if text:
                paragraphs.append(text)

        logger.debug(f"Extracted {len(paragraphs)} paragraph(s)")
        return paragraphs

    def _paragraph_text(self, paragraph_node) -> str:
        runs = paragraph_node.iterfind(WordElement.TEXT.xpath)
        return " ".join("".join(t.itertext()) for t in runs)


class ParagraphFinder:
    """Keyword search over a document's paragraphs."""

    def __init__(self, paragraphs: Iterable[str]):
        self.paragraphs = list(paragraphs)

    @classmethod
    def from_tree(cls, tree: DocumentTree) -> "ParagraphFinder":
        """Build a finder from a parsed document tree."""
        return cls(ParagraphExtractor().extract(tree))

    def find_paragraphs_with_keyword(self, keyword: str) -> list[str]:
        """Return every paragraph containing keyword, in document order."""
        keyword = str(keyword).lower()
        return [p for p in self.paragraphs if contains_keyword(p, keyword)]

    def find_paragraphs_with_keywords(self, keywords: Iterable[str]) -> list[KeywordMatches]:
        """
        Search for several keywords at once.

        Only keywords with at least one matching paragraph are reported,
        in the order they were given. Use find_missing_keywords for the
        keywords that matched nothing.

        Args:
            keywords: Keywords to search for

        Returns:
            One KeywordMatches per matching keyword
        """
        all_results: list[KeywordMatches] = []

        for keyword in keywords:
            results = self.find_paragraphs_with_keyword(keyword)
            if results:
                all_results.append(KeywordMatches(keyword=keyword, results=results))

        return all_results

    def find_missing_keywords(self, keywords: Iterable[str]) -> list[str]:
        """Return keywords that appear in no paragraph, in input order."""
        return [k for k in keywords if not self.find_paragraphs_with_keyword(k)]
