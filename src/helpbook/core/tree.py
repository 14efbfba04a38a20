"""Weight-ordered hierarchy of sections and documents"""

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace
from typing import Optional

from helpbook.core.models import DirectoryMetadata, DirectoryNode, Document, DocumentNode, TreeNode


def sort_key(node: TreeNode) -> tuple:
    """Weight ascending, missing weight last, then name."""
    return (node.weight is None, node.weight or 0, node.name)


def parent_dir(relative_path: str) -> str:
    return relative_path.rsplit('/', 1)[0] if '/' in relative_path else ''


def _join(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


def group_by_directory(documents: Iterable[Document]) -> dict[str, list[Document]]:
    """Map each containing directory ('' for the root) to its direct documents."""
    groups: dict[str, list[Document]] = defaultdict(list)
    for doc in documents:
        groups[parent_dir(doc.relative_path)].append(doc)
    return dict(groups)


def _immediate_subdirs(directories: Iterable[str], current: str) -> set[str]:
    prefix = current + '/' if current else ''
    return {
        key[len(prefix):].split('/', 1)[0]
        for key in directories
        if key != current and key.startswith(prefix)
    }


def _build_children(
    groups: dict[str, list[Document]],
    current: str,
    directory_metadata: Mapping[str, DirectoryMetadata],
    ) -> tuple[TreeNode, ...]:
    nodes: list[TreeNode] = [
        DocumentNode(name=d.file_name, relative_path=d.relative_path, document_id=d.id, weight=d.weight)
        for d in groups.get(current, [])
    ]
    for name in _immediate_subdirs(groups, current):
        nodes.append(_build_directory(groups, _join(current, name), name, directory_metadata))
    return tuple(sorted(nodes, key=sort_key))


def _build_directory(
    groups: dict[str, list[Document]],
    path: str,
    name: str,
    directory_metadata: Mapping[str, DirectoryMetadata],
    ) -> DirectoryNode:
    meta = directory_metadata.get(path) or DirectoryMetadata()
    return DirectoryNode(
        name=name,
        relative_path=path,
        children=_build_children(groups, path, directory_metadata),
        weight=meta.weight,
        title=meta.title,
        description=meta.description,
    )


def build_tree(
    documents: Iterable[Document],
    directory_metadata: Optional[Mapping[str, DirectoryMetadata]] = None,
    base_name: str = '',
    ) -> DirectoryNode:
    """Build the full tree. Directories without any descendant document get no node."""
    groups = group_by_directory(documents)
    return DirectoryNode(
        name=base_name,
        relative_path='',
        children=_build_children(groups, '', directory_metadata or {}),
    )


# --- queries ---

def find_directory(root: DirectoryNode, path: str) -> Optional[DirectoryNode]:
    """Return the DirectoryNode at path ('' is the root), else None."""
    node = root
    for name in (path.split('/') if path else []):
        node = next(
            (c for c in node.children if isinstance(c, DirectoryNode) and c.name == name),
            None,
        )
        if node is None:
            return None
    return node


def find_document_path(root: DirectoryNode, document_id: str) -> list[TreeNode]:
    """Return [root, ...ancestor directories, document node], or [] if not found."""
    for child in root.children:
        if isinstance(child, DocumentNode) and child.document_id == document_id:
            return [root, child]
        if isinstance(child, DirectoryNode):
            found = find_document_path(child, document_id)
            if found:
                return [root] + found
    return []


def iter_directories(root: DirectoryNode) -> Iterator[DirectoryNode]:
    """Yield every DirectoryNode below root, depth first, in tree order."""
    for child in root.children:
        if isinstance(child, DirectoryNode):
            yield child
            yield from iter_directories(child)


def content_nodes(root: DirectoryNode) -> tuple[TreeNode, ...]:
    """Top-level entries for landing pages, unwrapping a single wrapper directory."""
    if len(root.children) == 1 and isinstance(root.children[0], DirectoryNode):
        return root.children[0].children
    return root.children


# --- rebuilds ---

def _splice(node: DirectoryNode, path: str, replacement: DirectoryNode) -> DirectoryNode:
    if node.relative_path == path:
        return replacement
    children = tuple(
        _splice(c, path, replacement)
        if isinstance(c, DirectoryNode) and (path == c.relative_path or path.startswith(c.relative_path + '/'))
        else c
        for c in node.children
    )
    return replace(node, children=children)


def rebuild_subtree(
    root: DirectoryNode,
    path: str,
    documents: Iterable[Document],
    directory_metadata: Optional[Mapping[str, DirectoryMetadata]] = None,
    ) -> DirectoryNode:
    """Return a new tree where the directory at path is rebuilt from documents.

    path must name a directory present in root. The rest of the tree is shared.
    """
    existing = find_directory(root, path)
    if existing is None:
        raise KeyError(f"No directory node at '{path}'")
    groups = group_by_directory(documents)
    fresh = replace(existing, children=_build_children(groups, path, directory_metadata or {}))
    return _splice(root, path, fresh)


def _spine(path: str) -> list[str]:
    """'' plus every ancestor directory of path, shallowest first ('a/b' -> ['', 'a', 'a/b'])."""
    parts = path.split('/') if path else []
    return [''] + ['/'.join(parts[:i]) for i in range(1, len(parts) + 1)]


def insert_document(
    root: DirectoryNode,
    documents: Iterable[Document],
    document: Document,
    directory_metadata: Optional[Mapping[str, DirectoryMetadata]] = None,
    ) -> DirectoryNode:
    """New tree including document; documents must already contain it."""
    target = next(p for p in reversed(_spine(parent_dir(document.relative_path))) if find_directory(root, p))
    return rebuild_subtree(root, target, documents, directory_metadata)


def delete_document(
    root: DirectoryNode,
    documents: Iterable[Document],
    relative_path: str,
    directory_metadata: Optional[Mapping[str, DirectoryMetadata]] = None,
    ) -> DirectoryNode:
    """New tree without the document at relative_path; documents must already exclude it."""
    remaining = list(documents)
    directories = group_by_directory(remaining).keys()

    def has_documents(path: str) -> bool:
        return not path or any(d == path or d.startswith(path + '/') for d in directories)

    target = next(p for p in reversed(_spine(parent_dir(relative_path))) if has_documents(p))
    return rebuild_subtree(root, target, remaining, directory_metadata)
