"""Breadcrumb trail from the home page to the current document"""

from helpbook.core.compose.layout import esc
from helpbook.core.models import DirectoryNode, Document
from helpbook.core.paths import HOME_PAGE, relative_link, section_index_path, to_page_path
from helpbook.core.tree import find_document_path
from helpbook.core.utils.slug import display_name


def breadcrumb_items(document: Document, tree: DirectoryNode) -> list[tuple[str, str | None]]:
    """(label, href) pairs: home, each ancestor section, then the unlinked current page."""
    current = to_page_path(document.relative_path)
    items: list[tuple[str, str | None]] = [('Home', relative_link(current, HOME_PAGE))]
    # path[0] is the synthetic root; the home link stands in for it
    for node in find_document_path(tree, document.id)[1:-1]:
        label = node.title or display_name(node.name)
        items.append((label, relative_link(current, section_index_path(node.relative_path))))
    items.append((document.title, None))
    return items


def breadcrumbs(document: Document, tree: DirectoryNode) -> str:
    """Render the breadcrumb <nav>."""
    lines = ['<nav class="breadcrumb" aria-label="Breadcrumb">', '<ol>']
    for i, (label, href) in enumerate(breadcrumb_items(document, tree)):
        if href is None:
            lines.append(f'<li aria-current="page"><span>{esc(label)}</span></li>')
        elif i == 0:
            lines.append(f'<li><a href="{esc(href)}" title="Home">🏠</a></li>')
        else:
            lines.append(f'<li><a href="{esc(href)}">{esc(label)}</a></li>')
    lines += ['</ol>', '</nav>']
    return '\n'.join(lines)
