"""Shared HTML shell: head, body wrapper, and escaping"""

import json
from html import escape
from typing import Optional

from helpbook.core.paths import ASSETS_DIR, HOME_PAGE, relative_link
from helpbook.core.assets import STYLESHEET_NAME


SIDEBAR_SCRIPT = """<script>
function toggleSection(header) {
    const content = header.parentElement.querySelector('.toc-section-content');
    if (!content) return;
    const expanded = header.getAttribute('aria-expanded') === 'true';
    header.setAttribute('aria-expanded', String(!expanded));
    const button = header.querySelector('.disclosure-button');
    if (button) button.textContent = expanded ? '\\u25B6' : '\\u25BC';
    content.style.display = expanded ? 'none' : 'block';
}
</script>"""


def esc(text: str) -> str:
    return escape(text, quote=True)


def head(
    page_path: str,
    title: str,
    description: Optional[str] = None,
    keywords: Optional[list[str]] = None,
    extra: Optional[str] = None,
    ) -> str:
    """<head> with meta tags and a stylesheet link resolved from page_path.

    extra is appended verbatim before </head> (page scripts and styles).
    """
    stylesheet = relative_link(page_path, f"{ASSETS_DIR}/{STYLESHEET_NAME}")
    lines = [
        '<head>',
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'<title>{esc(title)}</title>',
    ]
    if description:
        lines.append(f'<meta name="description" content="{esc(description)}">')
    if keywords:
        lines.append(f'<meta name="keywords" content="{esc(", ".join(keywords))}">')
    lines += [
        '<meta name="robots" content="index, anchors">',
        f'<link rel="stylesheet" href="{esc(stylesheet)}">',
    ]
    if extra:
        lines.append(extra)
    lines.append('</head>')
    return '\n'.join(lines)


def frame_redirect(page_path: str) -> str:
    """Script that reopens a page loaded outside the help frame as index.html#<page_path>."""
    target = json.dumps(f"{relative_link(page_path, HOME_PAGE)}#{page_path}")
    return '\n'.join([
        '<script>',
        'if (window.self === window.top) {',
        f'    window.location.replace({target});',
        '}',
        '</script>',
    ])


def page(head_html: str, main_html: str, sidebar_html: str = '') -> str:
    """Full document: optional sidebar, then the main content column."""
    main_class = 'help-main-content with-sidebar' if sidebar_html else 'help-main-content'
    parts = [
        '<!DOCTYPE html>',
        '<html lang="en">',
        head_html,
        '<body>',
    ]
    if sidebar_html:
        parts.append(sidebar_html)
    parts += [
        f'<div id="help-main-content" class="{main_class}">',
        main_html,
        '</div>',
    ]
    if sidebar_html:
        parts.append(SIDEBAR_SCRIPT)
    parts += ['</body>', '</html>', '']
    return '\n'.join(parts)
