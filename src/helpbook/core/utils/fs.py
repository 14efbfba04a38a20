"""Filesystem walking shared by document and asset discovery"""

from pathlib import Path


def iter_files(root: Path) -> list[Path]:
    """Sorted regular files under root, skipping any hidden file or directory."""
    return sorted(
        p for p in root.rglob('*')
        if p.is_file() and not any(part.startswith('.') for part in p.relative_to(root).parts)
    )


def relative_posix(path: Path, root: Path) -> str:
    """Slash-separated path of path below root; '' for root itself."""
    rel = path.relative_to(root).as_posix()
    return '' if rel == '.' else rel
