"""Root test configuration: shared content-directory fixtures"""

from pathlib import Path

import pytest


def _write_post(root: Path, name: str, title: str = None, body: str = "Body.\n", **fields) -> Path:
    """Write a post with YAML frontmatter under root and return its path."""
    lines = []
    if title is not None:
        lines.append(f"title: {title}")
    for key, value in fields.items():
        lines.append(f"{key}: {value}")
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("---\n" + "\n".join(lines) + "\n---\n\n" + body, encoding="utf-8")
    return path


@pytest.fixture(name="write_post")
def write_post_fixture():
    return _write_post


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path):
    """Three posts: two sharing a date, one newer, one of them tagged."""
    root = tmp_path / "content"
    _write_post(root, "2024-01-10-alpha.mdx", "Alpha", tags="[python, notes]")
    _write_post(root, "2024-03-01-bravo.md", "Bravo", body="# Intro\n\nHello **world**.\n")
    _write_post(root, "2024-01-10-charlie.md", "Charlie", tags="[notes]")
    return root
