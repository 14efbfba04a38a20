"""Content page composition and rewriting of rendered HTML"""

import logging
from collections.abc import Mapping

from bs4 import BeautifulSoup

from helpbook.core.compose.breadcrumbs import breadcrumbs
from helpbook.core.compose.layout import esc, frame_redirect, head, page
from helpbook.core.compose.sidebar import sidebar
from helpbook.core.errors import ComposeError
from helpbook.core.models import BookMetadata, DirectoryNode, Document
from helpbook.core.paths import (
    HOME_PAGE,
    PAGE_SUFFIX,
    SOURCE_SUFFIX,
    is_external,
    relative_link,
    resolve_asset_path,
    rewrite_absolute_link,
    to_page_path,
)
from helpbook.core.utils.slug import anchor_name


logger = logging.getLogger(__name__)

HEADINGS = ['h1', 'h2', 'h3', 'h4', 'h5', 'h6']
ASSET_ATTRIBUTES = [('img', 'src'), ('link', 'href'), ('script', 'src')]


def _page_link(href: str, document_path: str) -> str:
    """Links to .md sources point at their rendered .html pages.

    Root-absolute links ('/guides/x.md') are resolved from the tree root and
    made relative to the current document.
    """
    if not href or is_external(href) or href.startswith('#'):
        return href
    path, sep, fragment = href.partition('#')
    if path.startswith('/'):
        target = to_page_path(path) or HOME_PAGE
        path = relative_link(to_page_path(document_path), target)
    elif path.endswith(SOURCE_SUFFIX):
        path = path[:-len(SOURCE_SUFFIX)] + PAGE_SUFFIX
    return path + sep + fragment


def _rewrite(html: str, document_path: str, base_url: str) -> str:
    soup = BeautifulSoup(html, 'html.parser')

    for tag_name, attr in ASSET_ATTRIBUTES:
        for tag in soup.find_all(tag_name, attrs={attr: True}):
            tag[attr] = resolve_asset_path(tag[attr], document_path)

    for a in soup.find_all('a', href=True):
        href = a['href']
        rewritten = rewrite_absolute_link(href, document_path, base_url) if base_url else href
        a['href'] = _page_link(rewritten, document_path) if rewritten == href else rewritten

    # TODO: disambiguate headings whose text sanitizes to the same anchor name
    for heading in soup.find_all(HEADINGS):
        name = anchor_name(heading.get_text())
        if name:
            heading.insert_before(soup.new_tag('a', attrs={'name': name}))

    return str(soup)


def rewrite_content(html: str, document_path: str, base_url: str = '') -> str:
    """Rewrite asset refs, site links and heading anchors in a rendered fragment.

    Any failure falls back to the fragment unmodified for this page only.
    """
    try:
        return _rewrite(html, document_path, base_url)
    except Exception as e:
        logger.warning("Passing %s through unmodified; HTML rewrite failed: %s", document_path, e)
        return html


def content_page(
    document: Document,
    tree: DirectoryNode,
    documents: Mapping[str, Document],
    metadata: BookMetadata,
    include_sidebar: bool = True,
    ) -> str:
    """Complete HTML for one document."""
    if document.rendered_html is None:
        raise ComposeError(f"Document has no rendered HTML: {document.relative_path}")

    current = to_page_path(document.relative_path)
    body = rewrite_content(document.rendered_html, document.relative_path, metadata.base_url)
    main = [
        breadcrumbs(document, tree),
        '<div class="page-content">',
        f'<h1>{esc(document.title)}</h1>',
    ]
    if document.description:
        main.append(f'<p class="subtitle">{esc(document.description)}</p>')
    main += [body, '</div>']

    nav = sidebar(tree, documents, metadata.help_book_title, current) if include_sidebar else ''
    redirect = None if include_sidebar else frame_redirect(current)
    return page(
        head(current, document.title, document.description, document.keywords, extra=redirect),
        '\n'.join(main),
        nav,
    )
