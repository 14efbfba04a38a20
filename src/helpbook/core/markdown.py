"""Markdown-to-HTML conversion via markdown-it"""

from markdown_it import MarkdownIt

from helpbook.core.errors import ConversionFailed


DEFAULT_PRESET = 'gfm-like'


def make_parser(preset: str = DEFAULT_PRESET) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name; raw HTML passes through."""
    return MarkdownIt(preset, options_update={"linkify": False, "html": True})


def markdown_to_html(text: str, preset: str = DEFAULT_PRESET) -> str:
    """Render a Markdown body to an HTML fragment."""
    try:
        return make_parser(preset).render(text)
    except Exception as e:
        raise ConversionFailed(f"Markdown conversion failed: {e}") from e


def render_inline(text: str, preset: str = DEFAULT_PRESET) -> str:
    """Render short Markdown text, dropping the single wrapping <p> if present."""
    html = markdown_to_html(text, preset).strip()
    if html.startswith('<p>') and html.endswith('</p>') and html.count('<p>') == 1:
        html = html[3:-4]
    return html
