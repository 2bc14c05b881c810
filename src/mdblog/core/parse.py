"""File discovery and frontmatter extraction"""

import re
from pathlib import Path
from typing import Any

import yaml

from mdblog.core.errors import FrontmatterError, LoadError
from mdblog.core.models import RawDocument


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*(?:\n|$)', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _strip_frontmatter(text: str, source: str = None) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise FrontmatterError(f"invalid YAML frontmatter: {e}", source=source) from e
        except ValueError as e:
            # PyYAML builds dates eagerly; 2024-02-30 fails inside the constructor
            raise FrontmatterError(f"invalid value in YAML frontmatter: {e}", source=source) from e
        if not isinstance(fm, dict):
            raise FrontmatterError(
                f"invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}",
                source=source,
            )
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if not path.exists():
        raise LoadError(f"content path does not exist: {path}")
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def parse_file(path: Path, root: Path = None) -> RawDocument:
    """Read a single markdown file into a RawDocument.

    source_path is relative to root when given (root may be the file itself,
    in which case only the file name is kept).
    """
    if root is None or root == path:
        rel = Path(path.name)
    else:
        rel = path.relative_to(root)
    source = rel.as_posix()
    try:
        raw = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise LoadError(f"not valid UTF-8: {e}", source=source) from e
    frontmatter, body = _strip_frontmatter(raw, source)
    return RawDocument(
        source_path=source,
        file_name=path.name,
        frontmatter=frontmatter,
        body=body,
    )


def parse_dir(path: Path) -> list[RawDocument]:
    """Parse all .md/.mdx files under path (file or directory) in load order."""
    return [parse_file(p, path) for p in discover_files(path)]
