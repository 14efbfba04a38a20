"""Section index pages, the landing page, and the table of contents"""

from collections.abc import Mapping
from typing import Optional

from helpbook.core.compose.layout import esc, frame_redirect, head, page
from helpbook.core.compose.sidebar import sidebar
from helpbook.core.models import BookMetadata, DirectoryNode, Document, TreeNode
from helpbook.core.paths import HOME_PAGE, TOC_PAGE, WELCOME_PAGE, relative_link, section_index_path, to_page_path
from helpbook.core.tree import content_nodes
from helpbook.core.utils.slug import display_name


def _topic(node: TreeNode, documents: Mapping[str, Document], current: str) -> Optional[str]:
    """One table-of-contents entry: link plus optional description."""
    if isinstance(node, DirectoryNode):
        label = node.title or display_name(node.name)
        href = relative_link(current, section_index_path(node.relative_path))
        description = node.description
    else:
        doc = documents.get(node.document_id)
        if doc is None:
            return None
        label = doc.title
        href = relative_link(current, to_page_path(doc.relative_path))
        description = doc.description
    lines = ['<li>', f'<h3><a href="{esc(href)}">{esc(label)}</a></h3>']
    if description:
        lines.append(f'<p class="section-description">{esc(description)}</p>')
    lines.append('</li>')
    return '\n'.join(lines)


def topics(nodes: tuple[TreeNode, ...], documents: Mapping[str, Document], current: str) -> str:
    """One-level list of nodes, linked relative to the page at current."""
    if not nodes:
        return ''
    entries = [t for t in (_topic(n, documents, current) for n in nodes) if t]
    return '\n'.join(['<h2>Topics</h2>', '<ul>', *entries, '</ul>'])


def section_page(
    node: DirectoryNode,
    tree: DirectoryNode,
    documents: Mapping[str, Document],
    metadata: BookMetadata,
    include_sidebar: bool = True,
    ) -> str:
    """Index page for one section: title, description, and its immediate children."""
    current = section_index_path(node.relative_path)
    title = node.title or display_name(node.name)
    main = ['<div class="page-content">', f'<h1>{esc(title)}</h1>']
    if node.description:
        main.append(f'<p class="subtitle">{esc(node.description)}</p>')
    main += [topics(node.children, documents, current), '</div>']
    nav = sidebar(tree, documents, metadata.help_book_title, current) if include_sidebar else ''
    redirect = None if include_sidebar else frame_redirect(current)
    return page(
        head(current, f"{title} - {metadata.help_book_title}", node.description, extra=redirect),
        '\n'.join(main),
        nav,
    )


def landing_page(
    tree: DirectoryNode,
    documents: Mapping[str, Document],
    metadata: BookMetadata,
    include_sidebar: bool = True,
    ) -> str:
    """Home page: welcome text and the top-level topics.

    Without a sidebar this is welcome.html, shown inside the frame page.
    """
    current = HOME_PAGE if include_sidebar else WELCOME_PAGE
    main = [
        '<div class="page-content">',
        f'<h1>{esc(metadata.help_book_title)}</h1>',
        f'<p>Welcome to the help documentation for {esc(metadata.bundle_name)}.</p>',
        topics(content_nodes(tree), documents, current),
        '</div>',
    ]
    if include_sidebar:
        return page(
            head(current, metadata.help_book_title),
            '\n'.join(main),
            sidebar(tree, documents, metadata.help_book_title, current),
        )
    return page(head(current, metadata.help_book_title, extra=frame_redirect(current)), '\n'.join(main))


def _toc_nodes(nodes: tuple[TreeNode, ...], documents: Mapping[str, Document]) -> list[str]:
    lines = ['<ul>']
    for node in nodes:
        if isinstance(node, DirectoryNode):
            href = esc(relative_link(TOC_PAGE, section_index_path(node.relative_path)))
            label = esc(node.title or display_name(node.name))
            lines += ['<li>', f'<strong><a href="{href}">{label}</a></strong>']
            if node.children:
                lines += _toc_nodes(node.children, documents)
            lines.append('</li>')
        elif (doc := documents.get(node.document_id)) is not None:
            href = esc(relative_link(TOC_PAGE, to_page_path(doc.relative_path)))
            lines.append(f'<li><a href="{href}">{esc(doc.title)}</a></li>')
    lines.append('</ul>')
    return lines


def toc_page(tree: DirectoryNode, documents: Mapping[str, Document], metadata: BookMetadata) -> str:
    """Full hierarchical table of contents."""
    title = metadata.help_book_title
    main = [
        '<div class="page-content">',
        f'<h1>{esc(title)}</h1>',
        '<div class="toc">',
        *_toc_nodes(content_nodes(tree), documents),
        '</div>',
        '</div>',
    ]
    return page(head(TOC_PAGE, title, "Table of Contents"), '\n'.join(main))
