"""Data models for document extraction."""

from dataclasses import dataclass, field

Row = list[str]
Table = list[Row]


@dataclass
class KeywordMatches:
    """Paragraphs containing a keyword, in document order."""

    keyword: str
    results: list[str]


@dataclass
class ScanResult:
    """Everything extracted from one document in a single pass."""

    path: str
    tables: list[Table] = field(default_factory=list)
    paragraphs: list[str] = field(default_factory=list)
    matches: list[KeywordMatches] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
