"""Data models for documents, assets, the compiled tree, and the project"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import Any, NamedTuple, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field


class FrontMatter(BaseModel):
    """Recognized document metadata; unknown string-valued keys land in custom_properties."""
    title:       Optional[str] = None
    description: Optional[str] = None
    keywords:    Optional[list[str]] = None
    date:        Optional[Union[datetime, date, str]] = None
    draft:       Optional[bool] = None
    weight:      Optional[int] = None
    aliases:     Optional[list[str]] = None
    tags:        Optional[list[str]] = None
    categories:  Optional[list[str]] = None
    custom_properties: dict[str, str] = Field(default_factory=dict)


class DirectoryMetadata(BaseModel):
    """Section metadata read from a directory's _index.md."""
    title:       Optional[str] = None
    description: Optional[str] = None
    weight:      Optional[int] = None


@dataclass
class Document:
    """One content page. Only rendered_html changes after the scan."""
    relative_path: str
    front_matter:  FrontMatter
    raw_body:      str                      # after front matter removal + shortcode expansion
    rendered_html: Optional[str] = None     # None until the conversion step runs
    id:            str = field(default_factory=lambda: str(uuid4()))

    @property
    def file_name(self) -> str:
        return self.relative_path.rsplit('/', 1)[-1]

    @property
    def title(self) -> str:
        if self.front_matter.title:
            return self.front_matter.title
        name = self.file_name
        return name[:-3] if name.endswith('.md') else name

    @property
    def description(self) -> Optional[str]:
        return self.front_matter.description

    @property
    def keywords(self) -> list[str]:
        return self.front_matter.keywords or []

    @property
    def weight(self) -> Optional[int]:
        return self.front_matter.weight

    @property
    def draft(self) -> bool:
        return bool(self.front_matter.draft)


class AssetType(str, Enum):
    image = "image"
    stylesheet = "stylesheet"
    script = "script"
    other = "other"


@dataclass(frozen=True)
class AssetReference:
    """A non-document file found under the content root or a separate assets root."""
    source_path:   Path
    relative_path: str          # relative to its own scan root
    type:          AssetType

    @property
    def file_name(self) -> str:
        return self.relative_path.rsplit('/', 1)[-1]


@dataclass(frozen=True)
class DocumentNode:
    name:          str
    relative_path: str
    document_id:   str
    weight:        Optional[int] = None


@dataclass(frozen=True)
class DirectoryNode:
    name:          str
    relative_path: str
    children:      tuple["TreeNode", ...] = ()
    weight:        Optional[int] = None
    title:         Optional[str] = None
    description:   Optional[str] = None


TreeNode = Union[DirectoryNode, DocumentNode]


class Theme(str, Enum):
    modern = "modern"
    mavericks = "mavericks"
    tiger = "tiger"
    custom = "custom"


class BookMetadata(BaseModel):
    """Bundle-level metadata passed through to Info.plist generation."""
    bundle_identifier:  str
    bundle_name:        str
    help_book_title:    str
    bundle_version:     str = "1.0"
    bundle_short_version: str = "1.0"
    development_region: str = "en"
    access_path:        str = "en.lproj/index.html"
    toc_path:           str = "en.lproj/toc.html"
    index_path:         str = "search.helpindex"
    book_type:          str = "3"
    theme:              Theme = Theme.modern
    base_url:           str = ""

    def validation_errors(self) -> list[str]:
        errors = []
        if not self.bundle_identifier:
            errors.append("Bundle identifier is required")
        if not self.bundle_name:
            errors.append("Bundle name is required")
        if not self.help_book_title:
            errors.append("Help book title is required")
        return errors

    def to_info_plist(self) -> dict[str, Any]:
        return {
            "CFBundleIdentifier": self.bundle_identifier,
            "CFBundleName": self.bundle_name,
            "CFBundleVersion": self.bundle_version,
            "CFBundleShortVersionString": self.bundle_short_version,
            "CFBundlePackageType": "BNDL",
            "CFBundleSignature": "hbwr",
            "CFBundleInfoDictionaryVersion": "6.0",
            "CFBundleDevelopmentRegion": self.development_region,
            "HPDBookTitle": self.help_book_title,
            "HPDBookAccessPath": self.access_path,
            "HPDBookTOCPath": self.toc_path,
            "HPDBookIndexPath": self.index_path,
            "HPDBookType": self.book_type,
        }


@dataclass
class Project:
    """Aggregate of one build: documents, assets, compiled tree, and book metadata."""
    name:               str
    documents:          list[Document]
    assets:             list[AssetReference]
    tree:               DirectoryNode
    metadata:           BookMetadata
    directory_metadata: dict[str, DirectoryMetadata] = field(default_factory=dict)

    @cached_property
    def documents_by_id(self) -> dict[str, Document]:
        return {d.id: d for d in self.documents}


class Page(NamedTuple):
    """A composed HTML page and its path relative to the bundle's content root."""
    path: str
    html: str
