"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.dates import format_date
from mdblog.core.errors import LoadError
from mdblog.core.export import write_manifest
from mdblog.core.index import ContentIndex
from mdblog.core.loader import load
from mdblog.core.models import NotFound


ContentDirArg = Annotated[
    Optional[str], typer.Argument(help="Content directory (defaults to content_dir setting)")
]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _load(settings: Settings) -> ContentIndex:
    """Load the content index, turning load errors into a clean exit."""
    try:
        return load(settings.content_dir, settings)
    except LoadError as e:
        _fail("Could not load content", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Inspect and export a directory of blog posts."""
    level = "DEBUG" if verbose else _settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def list_cmd(
    content_dir: ContentDirArg = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts carrying this tag")] = None,
    ):
    """List posts, newest first."""
    index = _load(_settings(overrides={"content_dir": content_dir}))
    docs = index.with_tag(tag) if tag else index.list_sorted_by_date_descending()
    if not docs:
        typer.echo("No documents found." if not tag else f"No documents tagged '{tag}'.")
        raise typer.Exit(1)
    for doc in docs:
        typer.echo(f"{doc.date.isoformat()}  {doc.slug}  {doc.title}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Exact slug of the post")],
    content_dir: ContentDirArg = None,
    html: Annotated[bool, typer.Option("--html", help="Print the rendered HTML body")] = False,
    ):
    """Show a single post by slug."""
    index = _load(_settings(overrides={"content_dir": content_dir}))
    doc = index.find_by_slug(slug)
    if isinstance(doc, NotFound):
        typer.echo(f"Not found: {doc.slug}", err=True)
        raise typer.Exit(1)

    typer.echo(doc.title)
    typer.echo(format_date(doc.date))
    if doc.tags:
        typer.echo(f"Tags: {', '.join(doc.tags)}")
    typer.echo("")
    typer.echo(doc.html if html else doc.body)


def check_cmd(content_dir: ContentDirArg = None):
    """Validate every post; exits 1 on the first malformed document."""
    settings = _settings(overrides={"content_dir": content_dir})
    index = _load(settings)
    typer.echo(f"OK: {len(index)} document(s) in {settings.content_dir}/")


def tags_cmd(content_dir: ContentDirArg = None):
    """List distinct tags with post counts."""
    index = _load(_settings(overrides={"content_dir": content_dir}))
    counts = index.tag_counts()
    if not counts:
        typer.echo("No tags found.")
        return
    for tag, n in counts.items():
        typer.echo(f"{tag}  {n}")


def export_cmd(
    content_dir: ContentDirArg = None,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Manifest output file")] = None,
    ):
    """Write a JSON manifest of all posts, newest first."""
    settings = _settings(overrides={"content_dir": content_dir, "manifest_path": out})
    index = _load(settings)
    try:
        path = write_manifest(index, Path(settings.manifest_path))
    except OSError as e:
        _fail("Export failed", e)
    typer.echo(f"Exported {len(index)} document(s) to {path}")
