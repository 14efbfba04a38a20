"""Pipeline step functions: scan, compose, and export orchestration"""

import logging
from functools import partial
from pathlib import Path
from typing import NamedTuple, Optional

from helpbook.config import Settings
from helpbook.core.assets import merge_assets, scan_assets
from helpbook.core.compose.content import content_page
from helpbook.core.compose.frame import frame_page
from helpbook.core.compose.sections import landing_page, section_page, toc_page
from helpbook.core.errors import BuildError
from helpbook.core.export import write_bundle
from helpbook.core.markdown import markdown_to_html
from helpbook.core.models import Page, Project
from helpbook.core.paths import HOME_PAGE, TOC_PAGE, WELCOME_PAGE, section_index_path, to_page_path
from helpbook.core.project import assemble_project
from helpbook.core.providers.registry import get_provider
from helpbook.core.tree import iter_directories


logger = logging.getLogger(__name__)


class BuildResult(NamedTuple):
    bundle_path: Path
    documents:   int
    pages:       int
    assets:      int


def run_scan(settings: Settings, content_dir: Optional[Path] = None) -> Project:
    """Discover documents, section metadata, and assets, then compile the tree."""
    root = Path(content_dir or settings.content_dir)
    if not root.is_dir():
        raise BuildError(f"Content directory not found: {root}")

    provider = get_provider(
        settings.provider,
        converter=partial(markdown_to_html, preset=settings.parser_config),
        max_workers=settings.max_workers,
        include_drafts=settings.include_drafts,
    )
    documents = provider.scan_documents(root)
    directory_metadata = provider.scan_directory_metadata(root)

    groups = [scan_assets(root)]
    if settings.assets_dir:
        assets_root = Path(settings.assets_dir)
        if assets_root.is_dir():
            groups.append(scan_assets(assets_root))
        else:
            logger.warning("Assets directory not found: %s", assets_root)

    name = root.resolve().name
    return assemble_project(
        name=name,
        documents=documents,
        assets=merge_assets(*groups),
        directory_metadata=directory_metadata,
        metadata=settings.book_metadata(name),
        provider=provider,
    )


def run_compose(project: Project, include_sidebar: bool = True) -> list[Page]:
    """Compose every page: documents, section indexes, the TOC, and the landing page.

    Without a sidebar the landing page moves to welcome.html and index.html becomes
    the frame page that hosts every other page.
    """
    docs = project.documents_by_id
    pages = [
        Page(to_page_path(d.relative_path), content_page(d, project.tree, docs, project.metadata, include_sidebar))
        for d in project.documents
    ]
    pages += [
        Page(section_index_path(node.relative_path), section_page(node, project.tree, docs, project.metadata, include_sidebar))
        for node in iter_directories(project.tree)
    ]
    pages.append(Page(TOC_PAGE, toc_page(project.tree, docs, project.metadata)))
    if include_sidebar:
        pages.append(Page(HOME_PAGE, landing_page(project.tree, docs, project.metadata)))
    else:
        pages.append(Page(WELCOME_PAGE, landing_page(project.tree, docs, project.metadata, include_sidebar=False)))
        pages.append(Page(HOME_PAGE, frame_page(project.tree, docs, project.metadata)))

    seen: set[str] = set()
    for p in pages:
        if p.path in seen:
            raise BuildError(f"Two pages would be written to '{p.path}'")
        seen.add(p.path)
    logger.info("Composed %d page(s)", len(pages))
    return pages


def run_build(settings: Settings, content_dir: Optional[Path] = None) -> BuildResult:
    """Run the full pipeline: scan -> compose -> export."""
    project = run_scan(settings, content_dir)
    pages = run_compose(project, settings.include_sidebar)
    custom_css = Path(settings.custom_css) if settings.custom_css else None
    bundle, asset_count = write_bundle(
        project, pages, Path(settings.output_dir),
        custom_css=custom_css, max_workers=settings.max_workers,
    )
    return BuildResult(bundle, len(project.documents), len(pages), asset_count)
