"""Project assembly, validation, and whole-subtree edits"""

from collections import Counter
from collections.abc import Mapping
from dataclasses import replace

from helpbook.core.errors import BuildError, DuplicateDocumentError, NoDocumentsError
from helpbook.core.models import AssetReference, BookMetadata, DirectoryMetadata, Document, Project
from helpbook.core.paths import normalize_path
from helpbook.core.providers.base import ContentProvider
from helpbook.core.tree import build_tree, delete_document, insert_document


def check_documents(documents: list[Document]) -> None:
    """Raise a BuildError if the document set is empty, unnormalized, or has duplicate paths."""
    if not documents:
        raise NoDocumentsError("No documents found")
    for doc in documents:
        if normalize_path(doc.relative_path) != doc.relative_path or '..' in doc.relative_path.split('/'):
            raise BuildError(f"Document path is not normalized: '{doc.relative_path}'")
    counts = Counter(normalize_path(d.relative_path) for d in documents)
    duplicates = sorted(p for p, n in counts.items() if n > 1)
    if duplicates:
        raise DuplicateDocumentError(f"Duplicate document path(s): {', '.join(duplicates)}")


def assemble_project(
    name: str,
    documents: list[Document],
    assets: list[AssetReference],
    directory_metadata: Mapping[str, DirectoryMetadata],
    metadata: BookMetadata,
    provider: ContentProvider,
    ) -> Project:
    """Validate scanned content and compile the tree with the provider's ordering policy."""
    check_documents(documents)
    errors = metadata.validation_errors()
    if errors:
        raise BuildError("; ".join(errors))
    tree = provider.build_file_tree(documents, name, directory_metadata)
    return Project(
        name=name,
        documents=list(documents),
        assets=list(assets),
        tree=tree,
        metadata=metadata,
        directory_metadata=dict(directory_metadata),
    )


def add_document(project: Project, document: Document) -> Project:
    """Return a new project with document added and its section rebuilt."""
    documents = project.documents + [document]
    check_documents(documents)
    tree = insert_document(project.tree, documents, document, project.directory_metadata)
    return replace(project, documents=documents, tree=tree)


def remove_document(project: Project, document_id: str) -> Project:
    """Return a new project without the document, pruning sections left empty."""
    doc = project.documents_by_id.get(document_id)
    if doc is None:
        raise KeyError(f"Unknown document id '{document_id}'")
    documents = [d for d in project.documents if d.id != document_id]
    if not documents:
        tree = build_tree([], project.directory_metadata, project.tree.name)
    else:
        tree = delete_document(project.tree, documents, doc.relative_path, project.directory_metadata)
    return replace(project, documents=documents, tree=tree)
