"""Publish-date resolution and display formatting"""

import datetime
import re

from mdblog.core.errors import InvalidDateError
from mdblog.core.models import RawDocument


# Filenames carry their publish date in the first 10 characters, e.g.
# 2024-03-01-hello-world.mdx.
FILENAME_DATE_LEN = 10
ISO_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def parse_iso_date(text: str) -> datetime.date:
    """Parse a strict YYYY-MM-DD string; raise ValueError otherwise."""
    if not ISO_DATE_RE.match(text):
        raise ValueError(f"expected YYYY-MM-DD, got {text!r}")
    return datetime.date.fromisoformat(text)


def _from_field(value, source: str) -> datetime.date:
    """Coerce an explicit frontmatter date (YAML native or string) to a date."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) > FILENAME_DATE_LEN and text[FILENAME_DATE_LEN] in "T ":
                return datetime.datetime.fromisoformat(text).date()
            return parse_iso_date(text)
        except ValueError as e:
            raise InvalidDateError(f"unparseable date {value!r}", source=source, field="date") from e
    raise InvalidDateError(
        f"expected a date, got {type(value).__name__}", source=source, field="date"
    )


def _from_filename(file_name: str, source: str) -> datetime.date:
    """Parse the leading YYYY-MM-DD prefix of a file name."""
    prefix = file_name[:FILENAME_DATE_LEN]
    try:
        return parse_iso_date(prefix)
    except ValueError as e:
        raise InvalidDateError(
            f"no 'date' in frontmatter and file name {file_name!r} does not start with "
            f"a valid YYYY-MM-DD date",
            source=source,
            field="date",
        ) from e


def resolve_date(raw: RawDocument) -> datetime.date:
    """Return the publish date: explicit `date` field first, else the file name prefix."""
    value = raw.frontmatter.get("date")
    if value is not None:
        return _from_field(value, raw.source_path)
    return _from_filename(raw.file_name, raw.source_path)


def format_date(d: datetime.date) -> str:
    """Long display form, e.g. 'March 1, 2024'."""
    return f"{d:%B} {d.day}, {d.year}"
