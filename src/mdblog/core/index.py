"""In-memory content index: date-ordered listing and slug lookup"""

from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from mdblog.core.errors import DuplicateSlugError
from mdblog.core.models import Document, NotFound


class ContentIndex:
    """Read-only view over a loaded document set.

    Built once from documents in load order and never mutated afterwards,
    so a single instance can be shared freely between request handlers.
    """

    def __init__(self, documents: Iterable[Document]):
        docs = tuple(documents)
        by_slug: dict[str, Document] = {}
        for doc in docs:
            existing = by_slug.get(doc.slug)
            if existing is not None:
                raise DuplicateSlugError(
                    f"slug '{doc.slug}' is already used by {existing.source_path or '<unknown>'}",
                    source=doc.source_path or None,
                    field="slug",
                )
            by_slug[doc.slug] = doc

        self._documents = docs
        self._by_slug: Mapping[str, Document] = MappingProxyType(by_slug)
        # sorted() is stable, so equal dates keep load order
        self._sorted = tuple(sorted(docs, key=lambda d: d.date, reverse=True))

    @classmethod
    def load(cls, source_dir: Path | str, settings=None) -> "ContentIndex":
        """Load and validate every document under source_dir."""
        from mdblog.core.loader import load
        return load(source_dir, settings)

    def list_sorted_by_date_descending(self) -> tuple[Document, ...]:
        """All documents, newest first; ties keep load order."""
        return self._sorted

    def find_by_slug(self, slug: str) -> Document | NotFound:
        """Exact, case-sensitive lookup. A miss returns NotFound rather than raising."""
        doc = self._by_slug.get(slug)
        if doc is None:
            return NotFound(slug=slug)
        return doc

    def tags(self) -> list[str]:
        """Distinct tags across all documents, sorted alphabetically."""
        return sorted({t for d in self._documents for t in d.tags})

    def tag_counts(self) -> dict[str, int]:
        """Number of documents carrying each tag, keyed alphabetically."""
        counts = Counter(t for d in self._documents for t in d.tags)
        return {t: counts[t] for t in sorted(counts)}

    def with_tag(self, tag: str) -> tuple[Document, ...]:
        """Documents carrying tag, newest first."""
        return tuple(d for d in self._sorted if tag in d.tags)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug
