"""Integration tests for the CLI commands against a real content directory"""

import json
import logging

import pytest
from typer.testing import CliRunner

from mdblog.cli.cli import app


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI callback installs on the root logger."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture(name="runner")
def runner_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("CONTENT_DIR", "MANIFEST_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(f"MDBLOG_{name}", raising=False)
    return CliRunner()


def test_list_newest_first(runner, content_dir):
    """list prints date, slug and title, newest first with stable ties."""
    result = runner.invoke(app, ["list", str(content_dir)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "2024-03-01  2024-03-01-bravo  Bravo",
        "2024-01-10  2024-01-10-alpha  Alpha",
        "2024-01-10  2024-01-10-charlie  Charlie",
    ]


def test_list_uses_content_dir_setting(runner, tmp_path, content_dir):
    """Without an argument, list reads the content_dir setting (./content)."""
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "Bravo" in result.output


def test_list_by_tag(runner, content_dir):
    """--tag filters to matching posts."""
    result = runner.invoke(app, ["list", str(content_dir), "--tag", "python"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["2024-01-10  2024-01-10-alpha  Alpha"]


def test_list_empty_dir(runner, tmp_path):
    """An empty content directory exits 1 with a message."""
    (tmp_path / "empty").mkdir()
    result = runner.invoke(app, ["list", str(tmp_path / "empty")])
    assert result.exit_code == 1
    assert "No documents found." in result.output


def test_show_post(runner, content_dir):
    """show prints title, formatted date and body."""
    result = runner.invoke(app, ["show", "2024-03-01-bravo", str(content_dir)])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "Bravo"
    assert lines[1] == "March 1, 2024"
    assert "Hello **world**." in result.output


def test_show_post_html(runner, content_dir):
    """--html prints the rendered body."""
    result = runner.invoke(app, ["show", "2024-03-01-bravo", str(content_dir), "--html"])
    assert result.exit_code == 0, result.output
    assert '<h1 id="intro">Intro</h1>' in result.output
    assert "<strong>world</strong>" in result.output


def test_show_post_tags(runner, content_dir):
    """Tags are listed for tagged posts."""
    result = runner.invoke(app, ["show", "2024-01-10-alpha", str(content_dir)])
    assert "Tags: python, notes" in result.output


def test_show_not_found(runner, content_dir):
    """A missing slug exits 1 with a not-found message."""
    result = runner.invoke(app, ["show", "nonexistent-slug", str(content_dir)])
    assert result.exit_code == 1
    assert "Not found: nonexistent-slug" in result.output


def test_check_ok(runner, content_dir):
    """check reports the document count."""
    result = runner.invoke(app, ["check", str(content_dir)])
    assert result.exit_code == 0, result.output
    assert "OK: 3 document(s)" in result.output


def test_check_reports_load_error(runner, content_dir, write_post):
    """check exits 1 naming the offending document and field."""
    write_post(content_dir, "2024-07-07-untitled.md")
    result = runner.invoke(app, ["check", str(content_dir)])
    assert result.exit_code == 1
    assert "2024-07-07-untitled.md" in result.output
    assert "field 'title'" in result.output


def test_tags(runner, content_dir):
    """tags lists each tag with a count."""
    result = runner.invoke(app, ["tags", str(content_dir)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["notes  2", "python  1"]


def test_export_writes_manifest(runner, tmp_path, content_dir):
    """export writes a JSON manifest ordered newest first."""
    out = tmp_path / "dist" / "posts.json"
    result = runner.invoke(app, ["export", str(content_dir), "--out", str(out)])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [e["title"] for e in data] == ["Bravo", "Alpha", "Charlie"]


def test_verbose_flag_accepted(runner, content_dir):
    """-v enables debug logging without affecting the command result."""
    result = runner.invoke(app, ["-v", "check", str(content_dir)])
    assert result.exit_code == 0, result.output


def test_bad_config_yaml(runner, tmp_path, content_dir):
    """A broken config.yaml exits 1 with an error."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    result = runner.invoke(app, ["check", str(content_dir)])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output


def test_check_reports_impossible_yaml_date(runner, content_dir, write_post):
    """An impossible YAML date exits 1 with the file named instead of a traceback."""
    write_post(content_dir, "2024-08-08-bad-date.md", "Bad", date="2024-02-30")
    result = runner.invoke(app, ["check", str(content_dir)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "2024-08-08-bad-date.md" in result.output


def test_check_accepts_numeric_frontmatter_keys(runner, content_dir, write_post):
    """A post with a numeric frontmatter key loads cleanly."""
    write_post(content_dir, "2024-09-09-numeric.md", "Numeric", **{"2024": "note"})
    result = runner.invoke(app, ["check", str(content_dir)])
    assert result.exit_code == 0, result.output
    assert "OK: 4 document(s)" in result.output
