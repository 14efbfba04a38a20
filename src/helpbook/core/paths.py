"""Relative path computation between pages, section indexes, assets, and the home page.

All paths are slash-separated and relative to the bundle's content root. Nothing
here raises on malformed input: the worst case returns the least-transformed
string that can be built. No result ever climbs above the root of the tree.
"""

import re
from urllib.parse import urlparse


ASSETS_DIR = 'assets'
HOME_PAGE = 'index.html'
TOC_PAGE = 'toc.html'
WELCOME_PAGE = 'welcome.html'
SECTION_INDEX = '_index.html'
SOURCE_SUFFIX = '.md'
PAGE_SUFFIX = '.html'

_SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*:')


def normalize_path(path: str) -> str:
    """Collapse '.', '..', empty and leading-slash segments; '..' at the root is dropped."""
    parts: list[str] = []
    for seg in path.replace('\\', '/').split('/'):
        if seg in ('', '.'):
            continue
        if seg == '..':
            if parts:
                parts.pop()
            continue
        parts.append(seg)
    return '/'.join(parts)


def depth(path: str) -> int:
    """Number of directory levels above a file: its count of path separators."""
    return normalize_path(path).count('/')


def is_external(ref: str) -> bool:
    """True for scheme URLs (http:, https:, mailto:, data:) and protocol-relative '//' refs."""
    return ref.startswith('//') or bool(_SCHEME_RE.match(ref))


def to_page_path(path: str) -> str:
    """Map a source path to its output page path ('a/b.md' -> 'a/b.html')."""
    path = normalize_path(path)
    if path.endswith(SOURCE_SUFFIX):
        return path[:-len(SOURCE_SUFFIX)] + PAGE_SUFFIX
    return path


def section_index_path(directory: str) -> str:
    """Output path of a directory's section index; the tree root's index is the home page."""
    directory = normalize_path(directory)
    return f"{directory}/{SECTION_INDEX}" if directory else HOME_PAGE


def relative_link(from_path: str, to_path: str) -> str:
    """Shortest relative path from the directory containing from_path to the file to_path.

    Emits one '../' per directory level of divergence and none for siblings.
    """
    target = normalize_path(to_path)
    if not target:
        return to_path
    to_parts = target.split('/')
    from_dir = normalize_path(from_path).split('/')[:-1]
    to_dir = to_parts[:-1]

    common = 0
    for a, b in zip(from_dir, to_dir):
        if a != b:
            break
        common += 1

    up = '../' * (len(from_dir) - common)
    return up + '/'.join(to_parts[common:])


def resolve_asset_path(original_ref: str, document_path: str) -> str:
    """Point an authored src/href at the flat assets/ directory at the tree root.

    Only the final file name survives, so 'images/x.png', '../x.png', './x.png'
    and '/img/x.png' all resolve to the same asset. External URLs are untouched.
    """
    if not original_ref or is_external(original_ref) or original_ref.startswith('#'):
        return original_ref
    path = original_ref.split('#', 1)[0].split('?', 1)[0]
    name = path.rstrip('/').rsplit('/', 1)[-1]
    if name in ('', '.', '..'):
        return original_ref
    return '../' * depth(document_path) + f"{ASSETS_DIR}/{name}"


def _base_dir_name(base_url: str) -> str:
    """Last path segment of the base URL ('https://x.com/docs' -> 'docs')."""
    path = urlparse(base_url).path
    segments = [s for s in path.split('/') if s]
    return segments[-1] if segments else ''


def _target_page(path: str) -> str:
    path = normalize_path(path)
    if not path:
        return HOME_PAGE
    if path.endswith(SOURCE_SUFFIX):
        return path[:-len(SOURCE_SUFFIX)] + PAGE_SUFFIX
    if '.' not in path.rsplit('/', 1)[-1]:
        return path + PAGE_SUFFIX
    return path


def rewrite_absolute_link(href: str, document_path: str, base_url: str) -> str:
    """Turn a link under base_url into a tree-relative link from document_path.

    The base URL's last path segment is stripped from the current document's path
    when it leads it, so site URLs and tree paths share one coordinate space.
    Links outside base_url are returned unchanged.
    """
    base = base_url.rstrip('/')
    if not base or not href.startswith(base):
        return href
    rest = href[len(base):]
    if rest and rest[0] not in '/#?':
        return href                         # 'https://x.com/docsearch' is not under '/docs'

    path, sep, fragment = rest.partition('#')
    target = _target_page(path.split('?', 1)[0])

    current = to_page_path(document_path)
    base_dir = _base_dir_name(base)
    if base_dir and current.startswith(base_dir + '/'):
        current = current[len(base_dir) + 1:]

    return relative_link(current, target) + (sep + fragment)
