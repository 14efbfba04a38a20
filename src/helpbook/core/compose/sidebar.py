"""Collapsible navigation tree duplicated into every page"""

from collections.abc import Mapping
from typing import Optional

from helpbook.core.compose.layout import esc
from helpbook.core.models import DirectoryNode, Document, TreeNode
from helpbook.core.paths import relative_link, section_index_path, to_page_path
from helpbook.core.utils.slug import display_name


def _nodes(
    nodes: tuple[TreeNode, ...],
    documents: Mapping[str, Document],
    current: str,
    target_attr: str = '',
    ) -> list[str]:
    lines = ['<ul class="toc-list">']
    for node in nodes:
        if isinstance(node, DirectoryNode):
            label = esc(node.title or display_name(node.name))
            href = esc(relative_link(current, section_index_path(node.relative_path)))
            lines += [
                '<li class="toc-section">',
                '<div class="toc-section-header" onclick="toggleSection(this)" aria-expanded="true">',
                '<span class="disclosure-button">▼</span>',
                f'<a class="section-title" href="{href}"{target_attr}>{label}</a>',
                '</div>',
                '<div class="toc-section-content">',
                *_nodes(node.children, documents, current, target_attr),
                '</div>',
                '</li>',
            ]
            continue
        doc = documents.get(node.document_id)
        if doc is None:
            continue
        target = to_page_path(doc.relative_path)
        marker = ' class="current-page" aria-current="page"' if target == current else ''
        lines.append(f'<li><a href="{esc(relative_link(current, target))}"{marker}{target_attr}>{esc(doc.title)}</a></li>')
    lines.append('</ul>')
    return lines


def sidebar(
    tree: DirectoryNode,
    documents: Mapping[str, Document],
    book_title: str,
    current: str,
    target: Optional[str] = None,
    ) -> str:
    """Render the sidebar for the page at output path current; every link is relative to it.

    With target set, links open in that named frame instead of the sidebar's own window.
    """
    target_attr = f' target="{esc(target)}"' if target else ''
    lines = [
        '<nav id="help-sidebar" class="help-sidebar">',
        '<div class="sidebar-header">',
        f'<h2>{esc(book_title)}</h2>',
        '</div>',
        '<div class="sidebar-content">',
        *_nodes(tree.children, documents, current, target_attr),
        '</div>',
        '</nav>',
    ]
    return '\n'.join(lines)
