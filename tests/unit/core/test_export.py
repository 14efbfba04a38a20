"""Unit tests for core/export.py"""

import plistlib

import pytest

from helpbook.core.errors import BuildError
from helpbook.core.export import content_root, write_bundle, write_pages
from helpbook.core.models import AssetReference, AssetType, BookMetadata, Page, Project, Theme
from helpbook.core.tree import build_tree


@pytest.fixture(name="project")
def project_fixture(tmp_path, make_doc):
    image = tmp_path / "src" / "logo.png"
    image.parent.mkdir()
    image.write_bytes(b"png")
    docs = [make_doc("a.md")]
    return Project(
        name="book",
        documents=docs,
        assets=[AssetReference(source_path=image, relative_path="logo.png", type=AssetType.image)],
        tree=build_tree(docs),
        metadata=BookMetadata(bundle_identifier="com.example.book.help", bundle_name="Book", help_book_title="Book Help"),
    )


def test_write_bundle_layout(tmp_path, project):
    """Pages, assets, the stylesheet, and Info.plist land in the bundle layout."""
    pages = [Page("index.html", "<html>home</html>"), Page("guides/a.html", "<html>a</html>")]
    bundle, count = write_bundle(project, pages, tmp_path / "dist")

    root = bundle / "Contents" / "Resources" / "en.lproj"
    assert bundle == tmp_path / "dist" / "Book.help"
    assert content_root(bundle) == root
    assert count == 1
    assert (root / "index.html").read_text() == "<html>home</html>"
    assert (root / "guides" / "a.html").read_text() == "<html>a</html>"
    assert (root / "assets" / "logo.png").read_bytes() == b"png"
    assert "font-family" in (root / "assets" / "style.css").read_text()

    with (bundle / "Contents" / "Info.plist").open("rb") as f:
        plist = plistlib.load(f)
    assert plist["CFBundleIdentifier"] == "com.example.book.help"
    assert plist["HPDBookTitle"] == "Book Help"


def test_write_bundle_replaces_existing(tmp_path, project):
    """Files from a previous build do not survive a rebuild."""
    stale = tmp_path / "dist" / "Book.help" / "Contents" / "stale.txt"
    stale.parent.mkdir(parents=True)
    stale.write_text("old")
    write_bundle(project, [Page("index.html", "x")], tmp_path / "dist")
    assert not stale.exists()


def test_write_bundle_custom_theme(tmp_path, project):
    """The custom theme's stylesheet is copied in as style.css."""
    css = tmp_path / "brand.css"
    css.write_text("body { color: teal; }")
    project.metadata = project.metadata.model_copy(update={"theme": Theme.custom})
    bundle, _ = write_bundle(project, [Page("index.html", "x")], tmp_path / "dist", custom_css=css)
    assert (content_root(bundle) / "assets" / "style.css").read_text() == "body { color: teal; }"


def test_write_pages_failure_is_build_error(tmp_path):
    """A page that cannot be written fails the build."""
    (tmp_path / "blocker").write_text("a file, not a directory")
    with pytest.raises(BuildError, match="Failed to write page"):
        write_pages(tmp_path, [Page("blocker/page.html", "x")])


def test_write_bundle_unreadable_stylesheet_keeps_old_bundle(tmp_path, project):
    """A missing custom stylesheet fails the build before the previous bundle is removed."""
    previous = tmp_path / "dist" / "Book.help" / "Contents" / "Info.plist"
    previous.parent.mkdir(parents=True)
    previous.write_text("old")
    project.metadata = project.metadata.model_copy(update={"theme": Theme.custom})
    with pytest.raises(BuildError, match="Custom stylesheet not readable"):
        write_bundle(project, [Page("index.html", "x")], tmp_path / "dist", custom_css=tmp_path / "missing.css")
    assert previous.read_text() == "old"


def test_write_bundle_plist_failure_is_build_error(tmp_path, project, monkeypatch):
    """An I/O error while writing Info.plist surfaces as a BuildError."""
    def full_disk(*args, **kwargs):
        raise OSError("No space left on device")
    monkeypatch.setattr("helpbook.core.export.plistlib.dump", full_disk)
    with pytest.raises(BuildError, match="No space left on device"):
        write_bundle(project, [Page("index.html", "x")], tmp_path / "dist")
