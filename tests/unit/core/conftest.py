"""Shared fixtures for core unit tests"""

import datetime

import pytest

from mdblog.core.models import Document


def _make_doc(slug: str, date: str, title: str = None, tags=(), source_path: str = None) -> Document:
    return Document(
        slug=slug,
        title=title or slug.upper(),
        date=datetime.date.fromisoformat(date),
        tags=tuple(tags),
        source_path=source_path or f"{slug}.md",
    )


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    return _make_doc


@pytest.fixture(name="abc_docs")
def abc_docs_fixture():
    """Docs a, b, c in load order; a and c share a date, b is newest."""
    return [
        _make_doc("a", "2024-01-10", "A", tags=["python"]),
        _make_doc("b", "2024-03-01", "B"),
        _make_doc("c", "2024-01-10", "C", tags=["python", "notes"]),
    ]
