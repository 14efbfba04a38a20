"""Asset discovery, merging, and the flat asset manifest"""

import logging
from collections.abc import Iterable
from pathlib import Path

from helpbook.core.models import AssetReference, AssetType
from helpbook.core.utils.fs import iter_files
from helpbook.core.utils.hashing import sha256_file


logger = logging.getLogger(__name__)

ASSET_TYPES: dict[str, AssetType] = {
    '.png':  AssetType.image,
    '.jpg':  AssetType.image,
    '.jpeg': AssetType.image,
    '.gif':  AssetType.image,
    '.svg':  AssetType.image,
    '.webp': AssetType.image,
    '.css':  AssetType.stylesheet,
    '.js':   AssetType.script,
    '.pdf':  AssetType.other,
    '.ico':  AssetType.other,
}
STYLESHEET_NAME = 'style.css'


def asset_type(path: str) -> AssetType:
    """Classify a file purely by extension."""
    suffix = Path(path).suffix.lower()
    return ASSET_TYPES.get(suffix, AssetType.other)


def scan_assets(root: Path) -> list[AssetReference]:
    """Return every recognized asset under root with its root-relative path."""
    assets = [
        AssetReference(source_path=p, relative_path=p.relative_to(root).as_posix(), type=asset_type(p.name))
        for p in iter_files(root)
        if p.suffix.lower() in ASSET_TYPES
    ]
    for a in assets:
        logger.debug("Found asset %s (%s)", a.relative_path, a.type.value)
    logger.info("Found %d asset(s) in %s", len(assets), root)
    return assets


def merge_assets(*groups: Iterable[AssetReference]) -> list[AssetReference]:
    """Merge scans in order; a later asset replaces an earlier one with the same relative path."""
    merged: dict[str, AssetReference] = {}
    for group in groups:
        for asset in group:
            merged.pop(asset.relative_path, None)
            merged[asset.relative_path] = asset
    return list(merged.values())


def build_manifest(assets: Iterable[AssetReference]) -> list[tuple[str, Path]]:
    """Flatten assets to (file_name, source_path) pairs; the last asset with a name wins.

    Colliding files with different content are reported, identical copies are not.
    The stylesheet name is reserved for the theme and always skipped.
    """
    manifest: dict[str, Path] = {}
    for asset in assets:
        name = asset.file_name
        if name == STYLESHEET_NAME:
            logger.warning("Asset %s is shadowed by the theme stylesheet", asset.source_path)
            continue
        previous = manifest.get(name)
        if previous is not None and sha256_file(previous) != sha256_file(asset.source_path):
            logger.warning("Asset name collision on '%s': %s replaces %s", name, asset.source_path, previous)
        manifest[name] = asset.source_path
    return list(manifest.items())
