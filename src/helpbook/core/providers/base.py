"""Content provider interface: one implementation per static-site dialect"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Optional

from helpbook.core.markdown import markdown_to_html
from helpbook.core.models import DirectoryMetadata, DirectoryNode, Document
from helpbook.core.tree import build_tree


Converter = Callable[[str], str]


class ContentProvider(ABC):
    """Discovers documents and section metadata for one content dialect.

    Subclasses set identifier/display_name and implement scanning and shortcode
    expansion. Tree building defaults to the shared weight-ordered algorithm.
    """

    identifier: str = ''
    display_name: str = ''
    metadata_file_name: Optional[str] = None
    content_suffix: str = '.md'

    def __init__(
        self,
        converter: Converter = markdown_to_html,
        max_workers: int = 8,
        include_drafts: bool = False,
        ):
        self.converter = converter
        self.max_workers = max_workers
        self.include_drafts = include_drafts

    @abstractmethod
    def scan_documents(self, root: Path) -> list[Document]:
        """Parse every content file under root; failing files are logged and skipped."""

    @abstractmethod
    def scan_directory_metadata(self, root: Path) -> dict[str, DirectoryMetadata]:
        """Map directory relative path ('' for root) to its section metadata."""

    @abstractmethod
    def process_shortcodes(self, body: str) -> str:
        """Expand dialect macros to HTML; malformed macros stay verbatim."""

    def build_file_tree(
        self,
        documents: list[Document],
        base_name: str,
        directory_metadata: Mapping[str, DirectoryMetadata],
        ) -> DirectoryNode:
        return build_tree(documents, directory_metadata, base_name)
