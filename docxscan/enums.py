"""Enums for element names and output formats."""

from enum import StrEnum


class WordElement(StrEnum):
    """WordprocessingML element names, after namespace stripping."""

    TABLE = "tbl"
    ROW = "tr"
    CELL = "tc"
    PARAGRAPH = "p"
    TEXT = "t"

    @property
    def xpath(self) -> str:
        """XPath selecting every element of this kind below the context node."""
        return f".//{self.value}"


class OutputFormat(StrEnum):
    """Rendering of CLI results."""

    TEXT = "text"
    JSON = "json"
