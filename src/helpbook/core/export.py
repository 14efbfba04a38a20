"""Export: write composed pages, assets, stylesheet, and Info.plist into a .help bundle"""

import logging
import plistlib
import shutil
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from helpbook.core.assets import STYLESHEET_NAME, build_manifest
from helpbook.core.errors import BuildError
from helpbook.core.models import Page, Project
from helpbook.core.paths import ASSETS_DIR
from helpbook.core.themes import stylesheet


logger = logging.getLogger(__name__)

RESOURCES = Path("Contents") / "Resources"


def content_root(bundle: Path) -> Path:
    """Directory holding the pages and the flat assets/ folder."""
    return bundle / RESOURCES / "en.lproj"


def _write_page(root: Path, page: Page) -> Path:
    dest = root / page.path
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(page.html, encoding="utf-8")
    return dest


def write_pages(root: Path, pages: list[Page], max_workers: int = 8) -> None:
    """Write pages concurrently; the first failure cancels pending writes and is raised."""
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(_write_page, root, p) for p in pages]
        for future in as_completed(futures):
            try:
                future.result()
            except OSError as e:
                for f in futures:
                    f.cancel()
                raise BuildError(f"Failed to write page: {e}") from e


def copy_assets(project: Project, assets_dir: Path) -> int:
    """Copy the flattened asset manifest into assets_dir. Returns the number copied."""
    manifest = build_manifest(project.assets)
    for name, source in manifest:
        try:
            shutil.copy2(source, assets_dir / name)
        except OSError as e:
            raise BuildError(f"Failed to copy asset {source}: {e}") from e
    return len(manifest)


def write_bundle(
    project: Project,
    pages: list[Page],
    output_dir: Path,
    custom_css: Optional[Path] = None,
    max_workers: int = 8,
    ) -> tuple[Path, int]:
    """Write <bundle_name>.help under output_dir, replacing an existing bundle.

    Returns (bundle_path, asset_count).
    """
    meta = project.metadata
    bundle = output_dir / f"{meta.bundle_name}.help"
    root = content_root(bundle)
    assets_dir = root / ASSETS_DIR
    # read before the old bundle is removed so a bad stylesheet path leaves it in place
    css = stylesheet(meta.theme, custom_css)

    try:
        if bundle.exists():
            shutil.rmtree(bundle)
        assets_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BuildError(f"Failed to create bundle directory {bundle}: {e}") from e

    write_pages(root, pages, max_workers)
    count = copy_assets(project, assets_dir)
    try:
        (assets_dir / STYLESHEET_NAME).write_text(css, encoding="utf-8")
        with (bundle / "Contents" / "Info.plist").open("wb") as f:
            plistlib.dump(meta.to_info_plist(), f)
    except OSError as e:
        raise BuildError(f"Failed to write bundle metadata in {bundle}: {e}") from e

    logger.info("Wrote %d page(s) and %d asset(s) to %s", len(pages), count, bundle)
    return bundle, count
