"""Validate parsed files into Documents and build the content index"""

import logging
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import ValidationError

from mdblog.config import Settings
from mdblog.core.dates import resolve_date
from mdblog.core.errors import InvalidFieldError, MissingFieldError
from mdblog.core.index import ContentIndex
from mdblog.core.models import Document, RawDocument
from mdblog.core.parse import parse_dir
from mdblog.core.render import render_markdown


logger = logging.getLogger(__name__)

RESERVED_FIELDS = {"title", "date", "tags", "slug"}


def location_slug(source_path: str) -> str:
    """Slug from a content-relative path: drop the extension, collapse a trailing /index."""
    p = PurePosixPath(source_path).with_suffix('')
    if p.name == 'index' and p.parent != PurePosixPath('.'):
        p = p.parent
    return p.as_posix()


def _title(raw: RawDocument) -> str:
    value = raw.frontmatter.get("title")
    if value is None:
        raise MissingFieldError("required field is missing", source=raw.source_path, field="title")
    if not isinstance(value, str):
        raise InvalidFieldError(
            f"expected a string, got {type(value).__name__}", source=raw.source_path, field="title"
        )
    if not value.strip():
        raise MissingFieldError("required field is empty", source=raw.source_path, field="title")
    return value.strip()


def _tags(raw: RawDocument) -> tuple[str, ...]:
    value = raw.frontmatter.get("tags")
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
        raise InvalidFieldError("expected a list of strings", source=raw.source_path, field="tags")
    # dedupe, insertion order
    return tuple(dict.fromkeys(t.strip() for t in value if t.strip()))


def _slug(raw: RawDocument) -> str:
    value = raw.frontmatter.get("slug")
    if value is None:
        return location_slug(raw.source_path)
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldError("expected a non-empty string", source=raw.source_path, field="slug")
    return value.strip()


def build_document(raw: RawDocument, parser_config: str = 'gfm-like') -> Document:
    """Validate one RawDocument and render its body. Raises LoadError subclasses."""
    # YAML allows int or date keys (`2024: note`); stored keys are strings
    extra: dict[str, Any] = {
        str(k): v for k, v in raw.frontmatter.items() if k not in RESERVED_FIELDS
    }
    fields = dict(
        slug=_slug(raw),
        title=_title(raw),
        date=resolve_date(raw),
        tags=_tags(raw),
        body=raw.body,
        html=render_markdown(raw.body, parser_config),
        source_path=raw.source_path,
        frontmatter=extra,
    )
    try:
        return Document(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc") or ()
        raise InvalidFieldError(
            first["msg"],
            source=raw.source_path,
            field=str(loc[0]) if loc else None,
        ) from e


def load(source_dir: Path | str, settings: Settings = None) -> ContentIndex:
    """Load every document under source_dir into a ContentIndex.

    Fails on the first malformed document; no partial index is returned.
    """
    settings = settings or Settings()
    root = Path(source_dir)
    logger.debug("Loading content from %s", root)
    docs = []
    for raw in parse_dir(root):
        doc = build_document(raw, settings.parser_config)
        logger.debug("Loaded %s as '%s' (%s)", raw.source_path, doc.slug, doc.date.isoformat())
        docs.append(doc)
    index = ContentIndex(docs)
    logger.info("Loaded %d document(s) from %s", len(index), root)
    return index
