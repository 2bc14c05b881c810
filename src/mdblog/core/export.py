"""Export pipeline: JSON manifest of the post list"""

import json
import logging
from pathlib import Path

from mdblog.core.dates import format_date
from mdblog.core.index import ContentIndex
from mdblog.core.models import Document


logger = logging.getLogger(__name__)


def build_entry(doc: Document) -> dict:
    """Metadata-only manifest entry for one document."""
    return {
        "slug": doc.slug,
        "title": doc.title,
        "date": doc.date.isoformat(),
        "display_date": format_date(doc.date),
        "tags": list(doc.tags),
        "path": doc.source_path,
    }


def build_manifest(index: ContentIndex) -> list[dict]:
    """Manifest entries in listing order (newest first)."""
    return [build_entry(d) for d in index.list_sorted_by_date_descending()]


def write_manifest(index: ContentIndex, output_path: Path) -> Path:
    """Write the manifest as indented JSON, creating parent directories. Returns output_path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(build_manifest(index), indent=2, ensure_ascii=False) + "\n",
        encoding='utf-8',
    )
    logger.info("Wrote %d manifest entries to %s", len(index), output_path)
    return output_path
