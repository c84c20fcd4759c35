"""Shared fixtures for building .docx files on disk."""

import os

import pytest

# Keep a developer's environment from leaking into settings under test
for _key in [k for k in os.environ if k.startswith("DOCXSCAN_")]:
    del os.environ[_key]

from tests.builders import paragraph, table, write_docx  # noqa: E402


@pytest.fixture
def make_docx(tmp_path):
    """Factory fixture: make_docx(body) -> path to a .docx containing that body."""
    counter = {"n": 0}

    def _make(body: str | None = None, raw_document: str | bytes | None = None) -> str:
        counter["n"] += 1
        return write_docx(tmp_path / f"doc{counter['n']}.docx", body, raw_document)

    return _make


@pytest.fixture
def sample_docx(make_docx):
    """One 2x2 table and two paragraphs, one mentioning apple."""
    body = (
        table([["Fruit", "Qty"], ["Pear", "12"]])
        + paragraph("I like", "apple pie")
        + paragraph("Nothing to see")
    )
    return make_docx(body)
