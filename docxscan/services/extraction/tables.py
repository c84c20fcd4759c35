"""Table extraction from a namespace-stripped WordprocessingML tree."""

import logging
import re

from docxscan.enums import WordElement
from docxscan.services.extraction.loader import DocumentTree
from docxscan.services.extraction.models import Row, Table

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


def _text_runs(node) -> list[str]:
    """Text content of every text run below a node, in document order."""
    return ["".join(t.itertext()) for t in node.iterfind(WordElement.TEXT.xpath)]


def extract_cell_text(cell_node) -> str:
    """
    Derive the text of a single table cell.

    Text runs are joined with a space, then all whitespace is removed.
    """
    text = " ".join(_text_runs(cell_node))
    return WHITESPACE_RE.sub("", text).strip()


class TableExtractor:
    """Extract tables as rows of cell strings."""

    def extract(self, tree: DocumentTree) -> list[Table]:
        """
        Extract every table in the document.

        Nested tables are returned as tables of their own, and their rows
        also appear in the enclosing table.

        Args:
            tree: Namespace-stripped document root

        Returns:
            Tables in document order; empty tables and rows are omitted
        """
        tables: list[Table] = []

        for table_node in tree.iterfind(WordElement.TABLE.xpath):
            table = self._parse_table(table_node)
            if table:
                tables.append(table)

        logger.debug(f"Extracted {len(tables)} table(s)")
        return tables

    def _parse_table(self, table_node) -> Table:
        rows: list[Row] = []
        for row_node in table_node.iterfind(WordElement.ROW.xpath):
            row = self._parse_row(row_node)
            if row:
                rows.append(row)
        return rows

    def _parse_row(self, row_node) -> Row:
        return [extract_cell_text(cell) for cell in row_node.iterfind(WordElement.CELL.xpath)]
