"""Tests for the enums module."""

from docxscan.enums import OutputFormat, WordElement


class TestWordElement:
    """Tests for WordElement enum."""

    def test_values_are_wordprocessingml_names(self):
        assert WordElement.TABLE == "tbl"
        assert WordElement.ROW == "tr"
        assert WordElement.CELL == "tc"
        assert WordElement.PARAGRAPH == "p"
        assert WordElement.TEXT == "t"

    def test_all_elements_defined(self):
        """Should have all expected element names."""
        assert {e.value for e in WordElement} == {"tbl", "tr", "tc", "p", "t"}

    def test_xpath_selects_descendants(self):
        assert WordElement.TABLE.xpath == ".//tbl"
        assert WordElement.TEXT.xpath == ".//t"


class TestOutputFormat:
    """Tests for OutputFormat enum."""

    def test_comparison_with_string(self):
        assert OutputFormat.TEXT == "text"
        assert "json" == OutputFormat.JSON
        assert OutputFormat("json") is OutputFormat.JSON
