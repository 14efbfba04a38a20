"""Root test configuration: document factory and a sample Hugo content tree"""

from pathlib import Path

import pytest

from helpbook.core.models import Document, FrontMatter


# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)

CONTENT_FILES = {
    "_index.md": "---\ntitle: Docs\n---\n",
    "overview.md": "---\ntitle: Overview\nweight: 1\ndescription: What the app does\n---\n\nStart here.\n",
    "getting-started/_index.md": "---\ntitle: Getting Started\nweight: 2\ndescription: First steps\n---\n",
    "getting-started/installation.md": (
        "---\ntitle: Installation\nweight: 1\n---\n\n"
        "# Install\n\n![Diagram](diagram.png)\n"
    ),
    "guides/_index.md": "---\ntitle: Guides\nweight: 3\n---\n",
    "guides/basic-usage.md": (
        "---\ntitle: Basic Usage\nweight: 1\nkeywords: basics, usage\n---\n\n"
        "See [advanced](advanced-features.md#Tips) and "
        "[install](https://example.com/docs/getting-started/installation).\n\n"
        "![Shot](images/screenshot.png)\n\n"
        "{{< alert context=\"warning\" text=\"Back up **first**\" />}}\n"
    ),
    "guides/advanced-features.md": "---\ntitle: Advanced Features\nweight: 2\n---\n\n## Tips & Tricks\n\nText.\n",
    "guides/wip.md": "---\ntitle: Work In Progress\ndraft: true\n---\n\nNot yet.\n",
    "empty/_index.md": "---\ntitle: Empty Section\n---\n",
    "broken.md": "---\ntitle: Broken\n\nnever closed\n",
    ".hidden/secret.md": "# Secret\n",
}


def make_document(relative_path: str, weight: int = None, title: str = None, **front_matter) -> Document:
    return Document(
        relative_path=relative_path,
        front_matter=FrontMatter(title=title, weight=weight, **front_matter),
        raw_body="",
        rendered_html=f"<p>{relative_path}</p>\n",
    )


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    return make_document


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path) -> Path:
    """A Hugo content tree with sections, a draft, a broken file, and two images."""
    root = tmp_path / "content"
    for rel, text in CONTENT_FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (root / "getting-started" / "diagram.png").write_bytes(PNG_BYTES)
    (root / "guides" / "images").mkdir()
    (root / "guides" / "images" / "screenshot.png").write_bytes(PNG_BYTES)
    return root
