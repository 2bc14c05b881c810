"""Markdown body rendering with heading anchors"""

from markdown_it import MarkdownIt

from mdblog.core.utils.slug import HeadingSlugger


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _add_heading_ids(tokens: list) -> None:
    """Set a unique slugified `id` on every heading_open token."""
    slugger = HeadingSlugger()
    for i, tok in enumerate(tokens):
        if tok.type != 'heading_open' or i + 1 >= len(tokens):
            continue
        tok.attrSet('id', slugger.slug(tokens[i + 1].content))


def render_markdown(body: str, parser_config: str = 'gfm-like') -> str:
    """Render a markdown body to HTML; headings get anchor ids."""
    md = _make_parser(parser_config)
    env: dict = {}
    tokens = md.parse(body, env)
    _add_heading_ids(tokens)
    return md.renderer.render(tokens, md.options, env)
